"""Egg timer state: the egg outline, its colour and the boiling countdown."""

from __future__ import annotations

import math
from dataclasses import dataclass

TICKS_PER_SECOND = 25

_EGG_WHITE = (255, 239, 174, 255)


def egg_outline(
    a: float = 110.0, b: float = 150.0, d: float = 20.0, steps: int = 360
) -> list[tuple[float, float]]:
    """Return the closed egg curve as points, one per step from 0 to 360 degrees inclusive."""
    if steps <= 0:
        raise ValueError("steps must be positive")
    points = []
    for step in range(steps + 1):
        rad = math.radians(step * 360.0 / steps)
        cos_t = math.cos(rad)
        sin_t = math.sin(rad)
        x = a * cos_t
        y = -(math.sqrt(b * b - d * d * cos_t * cos_t) + d * sin_t) * sin_t
        points.append((x, y))
    return points


def egg_color(progress: float) -> tuple[int, int, int, int]:
    """Return the RGBA fill of the egg; it turns from pale yellow to red as progress grows."""
    red, green, blue, alpha = _EGG_WHITE
    return (
        red,
        int(green * (1 - progress)) % 256,
        int(blue * (1 - progress)) % 256,
        alpha,
    )


def parse_duration(text: str) -> float:
    """Read a boil duration in seconds; text that is not a number counts as zero."""
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _round_tenths(value: float) -> float:
    """Round to one decimal, halves away from zero."""
    scaled = abs(value) * 10
    rounded = math.floor(scaled + 0.5) / 10
    return math.copysign(rounded, value)


@dataclass
class EggTimer:
    """The boiling state of the egg timer."""

    boiling: bool = False
    progress: float = 0.0
    boil_duration: float = 0.0

    def toggle(self, text: str) -> None:
        """Start or stop boiling, reading the duration in seconds from ``text``."""
        self.boiling = not self.boiling
        if self.progress >= 1:
            self.progress = 0.0
        self.boil_duration = parse_duration(text) / (1 - self.progress)

    def tick(self) -> bool:
        """Advance one tick; return True when progress changed."""
        if not (self.boiling and self.progress < 1):
            return False
        if self.boil_duration == 0:
            self.progress = 1.0
        else:
            self.progress += 1.0 / TICKS_PER_SECOND / self.boil_duration
        if self.progress >= 1:
            self.progress = 1.0
        return True

    def button_label(self) -> str:
        """Return the text the start button shows."""
        if not self.boiling:
            return "Start"
        if self.progress < 1:
            return "Stop"
        return "Finished"

    def remaining_text(self) -> str | None:
        """Return the countdown in seconds with one decimal while boiling, else None."""
        if not (self.boiling and self.progress < 1):
            return None
        remaining = (1 - self.progress) * self.boil_duration
        return f"{_round_tenths(remaining):.1f}"