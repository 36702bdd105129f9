"""A square grid of coloured, labelled buttons."""

from __future__ import annotations

SIDE_LENGTH = 8
CELL_SIZE = 90


def _check(row: int, col: int, side: int) -> None:
    if side <= 0:
        raise ValueError("side must be positive")
    if not (0 <= row < side and 0 <= col < side):
        raise IndexError(f"cell ({row}, {col}) outside a {side}x{side} grid")


def cell_index(row: int, col: int, side: int = SIDE_LENGTH) -> int:
    """Return the position of a cell in row-major order."""
    _check(row, col, side)
    return row * side + col


def cell_label(row: int, col: int) -> str:
    """Return the text shown on a cell's button."""
    return f"R{row} C{col}"


def cell_color(row: int, col: int, side: int = SIDE_LENGTH) -> tuple[int, int, int, int]:
    """Return the RGBA background of a cell: red grows down, green grows right."""
    _check(row, col, side)
    red = (255 // side * row) % 256
    green = (255 // side * col) % 256
    blue = (255 * row * col // (side * side)) % 256
    return (red, green, blue, 255)