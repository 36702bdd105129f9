"""Teleprompter state: the speech, its scrolling, the focus bar and the colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

TRAILING_BLANK_LINES = 10

KEY_SPACE = "Space"
KEY_UP = "Up"
KEY_DOWN = "Down"
KEY_PAGE_UP = "PageUp"
KEY_PAGE_DOWN = "PageDown"

RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class ColorMode:
    """The colours used to paint the prompter."""

    background: RGBA
    foreground: RGBA
    focusbar: RGBA


DARK = ColorMode(
    background=(0x00, 0x00, 0x00, 0xFF),
    foreground=(0xFF, 0xFF, 0xFF, 0xFF),
    focusbar=(0xFF, 0x00, 0x00, 0x33),
)

LIGHT = ColorMode(
    background=(0xFF, 0xFE, 0xE0, 0xFF),
    foreground=(0x00, 0x00, 0x00, 0xFF),
    focusbar=(0xFF, 0x00, 0x00, 0x66),
)


def read_paragraphs(path: str | Path) -> list[str]:
    """Read a speech as one paragraph per line, padded with blank lines at the end.

    The padding lets the last line scroll out of view.
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.split("\n") + [""] * TRAILING_BLANK_LINES


@dataclass
class Prompter:
    """Scroll position, speed, layout and colours of the teleprompter."""

    paragraphs: list[str] = field(default_factory=list)
    scroll_y: float = 0.0
    focus_bar_y: float = 170.0
    text_width: float = 550.0
    font_size: float = 35.0
    autoscroll: bool = False
    autospeed: float = 1.0
    colors: ColorMode = DARK

    def scroll(self, delta: float) -> None:
        """Scroll by a mouse-wheel delta, measured in lines of text."""
        self.scroll_y = max(0.0, self.scroll_y + delta * self.font_size)

    def press(self) -> None:
        """A mouse press starts or stops autoscrolling."""
        self.autoscroll = not self.autoscroll

    def key(self, name: str, shift: bool = False) -> None:
        """Apply a key press; with shift held, every step is five times larger."""
        step = 5.0 if shift else 1.0

        if name == KEY_SPACE:
            self.autoscroll = not self.autoscroll
            if self.autoscroll and self.autospeed <= 0:
                self.autospeed = step

        if name == "U":
            self.focus_bar_y -= step
        if name == "D":
            self.focus_bar_y += step

        if name in ("K", KEY_UP):
            self.scroll_y -= step * 4
        if name == KEY_PAGE_UP:
            self.scroll_y -= step * 100
        if self.scroll_y < 0:
            self.scroll_y = 0.0

        if name in ("J", KEY_DOWN, KEY_PAGE_DOWN):
            self.scroll_y += step * 4
        if name == KEY_PAGE_DOWN:
            self.scroll_y += step * 100

        if name == "F":
            self.autoscroll = True
            self.autospeed += step

        if name == "S":
            if self.autospeed > 0:
                self.autospeed -= step
            if self.autospeed <= 0:
                self.autospeed = 0.0
                self.autoscroll = False

        if name == "+":
            self.font_size += step
        if name == "-":
            self.font_size -= step

        if name == "W":
            self.text_width += step * 10
        if name == "N":
            self.text_width -= step * 10

        if name == "C":
            self.colors = LIGHT if self.colors == DARK else DARK

    def advance(self) -> bool:
        """Move one frame of autoscroll; return True when another frame is wanted."""
        if not self.autoscroll:
            return False
        if self.autospeed < 0:
            self.autospeed = 0.0
        self.scroll_y += self.autospeed
        return True

    def margin_width(self, window_width: float) -> float:
        """Return the left and right margin around the text column."""
        return (window_width - self.text_width) / 3

    def focus_bar(self, window_width: int) -> tuple[int, int, int, int]:
        """Return the focus bar as (left, top, right, bottom) in pixels."""
        top = int(self.focus_bar_y)
        return (0, top, window_width, top + int(self.font_size * 1.5))