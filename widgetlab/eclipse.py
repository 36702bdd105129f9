"""An eclipse drawing: three moons, each crossed by a movable shadow."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
BLUE: RGBA = (0, 0, 255, 255)
CHEESE: RGBA = (0xFF, 0xA6, 0, 255)

MOON_COLORS: tuple[RGBA, ...] = (WHITE, BLUE, CHEESE)

RADIUS = 5.0
MOON_XS = (25.0, 50.0, 75.0)
MOON_Y = 50.0

QUIT_KEYS = frozenset({"Q", "Escape"})


class Circle(NamedTuple):
    """A filled circle in canvas percent coordinates."""

    x: float
    y: float
    radius: float
    color: RGBA


class Backdrop(NamedTuple):
    """A filled rectangle given by its centre and size."""

    x: float
    y: float
    width: float
    height: float
    color: RGBA


BACKDROP = Backdrop(50.0, 50.0, 95.0, 95.0, BLACK)


@dataclass
class Eclipse:
    """Shadow offset and moon colour of the eclipse drawing."""

    eclipse_x: float = 0.0
    eclipse_y: float = 0.0
    moon: RGBA = field(default=WHITE)

    def click(self) -> None:
        """Cycle the moon colour: white, blue, cheese, white."""
        if self.moon in MOON_COLORS:
            position = MOON_COLORS.index(self.moon)
            self.moon = MOON_COLORS[(position + 1) % len(MOON_COLORS)]

    def key(self, name: str) -> bool:
        """Move the shadow with the arrow keys; return True when the key asks to quit."""
        if name in QUIT_KEYS:
            return True
        if name == "Down":
            self.eclipse_y -= 1
        elif name == "Up":
            self.eclipse_y += 1
        elif name == "Right":
            self.eclipse_x += 1
        elif name == "Left":
            self.eclipse_x -= 1
        return False

    def scroll(self, dx: float, dy: float) -> None:
        """Move the shadow by a scroll amount, a hundredth per unit."""
        self.eclipse_x += dx / 100
        self.eclipse_y += dy / 100

    def circles(self) -> list[Circle]:
        """Return the circles to draw in order: each moon followed by its shadow."""
        shapes = []
        shadow_y = MOON_Y
        for x in MOON_XS:
            shapes.append(Circle(x, MOON_Y, RADIUS + 0.5, self.moon))
            shapes.append(
                Circle(self.eclipse_x + x - 1, self.eclipse_y + shadow_y + 2, RADIUS, BLACK)
            )
            shadow_y -= 2
        return shapes