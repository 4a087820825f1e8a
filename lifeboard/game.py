"""Conway's Game of Life on a small toroidal board."""

from __future__ import annotations

from collections.abc import Iterable

MAP_SIZE = 10

INITIAL_CELLS: tuple[int, ...] = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, 1, 0, 1, 0, 0, 0, 0, 0,
    0, 0, 0, 1, 1, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def wrapped_index(x: int, y: int) -> int:
    """Return the flat index of (x, y), wrapping both coordinates around the board."""
    return (y % MAP_SIZE) * MAP_SIZE + x % MAP_SIZE


class Life:
    """A MAP_SIZE x MAP_SIZE board whose edges wrap around."""

    size = MAP_SIZE

    def __init__(self, cells: Iterable[int] | None = None) -> None:
        values = INITIAL_CELLS if cells is None else cells
        self.cells = [int(value) for value in values]
        if len(self.cells) != MAP_SIZE * MAP_SIZE:
            raise ValueError(
                f"a board needs {MAP_SIZE * MAP_SIZE} cells, got {len(self.cells)}"
            )

    def alive(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) is alive."""
        return self.cells[wrapped_index(x, y)] == 1

    def toggle(self, x: int, y: int) -> None:
        """Flip the state of the cell at (x, y)."""
        self.cells[wrapped_index(x, y)] ^= 1

    def neighbours(self, x: int, y: int) -> int:
        """Count the live cells among the eight around (x, y)."""
        return sum(self.alive(x + dx, y + dy) for dx, dy in _OFFSETS)

    def step(self) -> None:
        """Advance the board by one generation."""
        new_cells = []
        for y in range(MAP_SIZE):
            for x in range(MAP_SIZE):
                count = self.neighbours(x, y)
                if self.alive(x, y):
                    new_cells.append(1 if count in (2, 3) else 0)
                else:
                    new_cells.append(1 if count == 3 else 0)
        self.cells = new_cells