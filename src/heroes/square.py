"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# The board is always 5x5. Keep it in one place in case a variant ever wants a bigger grid.
BOARD_DIMENSIONS = (5, 5)


@dataclass(frozen=True)
class Square:
    """Zero-based coordinates: x is the column, y is the row. (0, 0) is Player A's back-left corner."""

    x: int
    y: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])

    def offset(self, dx: int, dy: int) -> Square:
        return Square(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def all_squares() -> list[Square]:
    """Every square of the board, row by row."""
    return [
        Square(x, y)
        for y in range(BOARD_DIMENSIONS[1])
        for x in range(BOARD_DIMENSIONS[0])
    ]
