"""Command-line egg timer: a progress bar that fills while the egg boils."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from widgetlab.egg import TICKS_PER_SECOND, EggTimer

DEFAULT_TITLE = "Egg timer"
DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 600

# Progress added on every tick when boiling at the default pace.
PROGRESS_STEP = 0.004
DEFAULT_DURATION = 1 / (PROGRESS_STEP * TICKS_PER_SECOND)

BAR_WIDTH = 40
EGG_RADIUS = 120
EGG_HEIGHT = 240


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; invalid values exit with status 2."""
    parser = argparse.ArgumentParser(
        prog="widgetlab", description="Boil an egg and watch the progress."
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="title shown on top")
    parser.add_argument(
        "--size",
        nargs=2,
        type=_positive_int,
        default=(DEFAULT_WIDTH, DEFAULT_HEIGHT),
        metavar=("WIDTH", "HEIGHT"),
        help="size of the drawing area",
    )
    parser.add_argument(
        "--duration",
        type=_positive_float,
        default=DEFAULT_DURATION,
        help="boiling time in seconds",
    )
    parser.add_argument(
        "--fast", action="store_true", help="run the ticks without waiting"
    )
    args = parser.parse_args(argv)
    args.size = tuple(args.size)
    return args


def _egg_bounds(width: int) -> tuple[int, int, int, int]:
    """Return the egg's bounding box, centred horizontally in the drawing area."""
    centre = width // 2
    return (centre - EGG_RADIUS, 0, centre + EGG_RADIUS, EGG_HEIGHT)


def _render_frame(timer: EggTimer) -> str:
    filled = round(timer.progress * BAR_WIDTH)
    bar = "#" * filled + "." * (BAR_WIDTH - filled)
    percent = round(timer.progress * 100)
    return f"[{bar}] {percent:3d}% {timer.button_label()}"


def main(argv: Sequence[str] | None = None) -> int:
    """Boil one egg, printing a frame on every tick; return the exit status."""
    args = parse_args(argv)
    width, height = args.size
    left, top, right, bottom = _egg_bounds(width)
    print(f"{args.title} {width}x{height}")
    print(f"egg at ({left}, {top})-({right}, {bottom})")

    timer = EggTimer()
    timer.toggle(str(args.duration))
    print(_render_frame(timer))
    try:
        while timer.tick():
            print(_render_frame(timer))
            sys.stdout.flush()
            if not args.fast:
                time.sleep(1 / TICKS_PER_SECOND)
    except KeyboardInterrupt:
        timer.toggle(str(args.duration))
        print(_render_frame(timer))
        return 130
    return 0