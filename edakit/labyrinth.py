"""Path search in a square labyrinth of open and blocked cells."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterator, Sequence

SAMPLE_LABYRINTH = (
    (1, 1, 1, 0, 1, 0, 1, 1),
    (1, 0, 1, 1, 1, 1, 0, 1),
    (0, 0, 1, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 1, 1, 1, 1),
    (1, 1, 0, 1, 1, 0, 0, 0),
    (1, 1, 1, 1, 0, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1, 1),
)

_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

Grid = Sequence[Sequence[bool]]


@dataclass(frozen=True)
class Cell:
    """A row and column position in a grid."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class _Step:
    cell: Cell
    parent: _Step | None


def create_grid(size: int, value: bool = False) -> list[list[bool]]:
    """A ``size`` x ``size`` grid filled with ``value``."""
    return [[value] * size for _ in range(size)]


def is_valid_cell(cell: Cell, size: int) -> bool:
    """True when ``cell`` lies inside a ``size`` x ``size`` grid."""
    return 0 <= cell.row < size and 0 <= cell.col < size


def _check_start(grid: Grid, start: Cell) -> None:
    if not is_valid_cell(start, len(grid)):
        raise ValueError(f"start cell {start} is outside the grid")


def _open_neighbours(grid: Grid, cell: Cell, visited: list[list[bool]]) -> Iterator[Cell]:
    size = len(grid)
    for dr, dc in _OFFSETS:
        neighbour = Cell(cell.row + dr, cell.col + dc)
        if (
            is_valid_cell(neighbour, size)
            and grid[neighbour.row][neighbour.col]
            and not visited[neighbour.row][neighbour.col]
        ):
            yield neighbour


def path_exists(grid: Grid, start: Cell, end: Cell) -> bool:
    """Depth-first search for a route of open cells from ``start`` to ``end``."""
    _check_start(grid, start)
    visited = create_grid(len(grid), False)
    pending = [start]
    while pending:
        cell = pending[-1]
        visited[cell.row][cell.col] = True
        if cell == end:
            return True
        pending.pop()
        pending.extend(_open_neighbours(grid, cell, visited))
    return False


def find_path(grid: Grid, start: Cell, end: Cell) -> list[Cell] | None:
    """Depth-first route from ``start`` to ``end``, or None when there is none."""
    _check_start(grid, start)
    visited = create_grid(len(grid), False)
    pending = [_Step(start, None)]
    while pending:
        step = pending[-1]
        cell = step.cell
        if visited[cell.row][cell.col]:
            pending.pop()
            continue
        visited[cell.row][cell.col] = True
        if cell == end:
            break
        pending.extend(_Step(n, step) for n in _open_neighbours(grid, cell, visited))
    else:
        return None
    path: list[Cell] = []
    current: _Step | None = pending[-1]
    while current is not None:
        path.append(current.cell)
        current = current.parent
    path.reverse()
    return path


def format_path(path: Sequence[Cell]) -> str:
    """Cells written as ``(row,col)``, each followed by a dash."""
    return "".join(f"{cell}-" for cell in path)


def main(argv: list[str] | None = None) -> int:
    """Search the sample labyrinth and print the route found."""
    parser = argparse.ArgumentParser(description="Find a route in the sample labyrinth.")
    parser.add_argument("--start", type=int, nargs=2, default=(1, 2), metavar=("ROW", "COL"))
    parser.add_argument("--end", type=int, nargs=2, default=(5, 4), metavar=("ROW", "COL"))
    args = parser.parse_args(argv)
    grid = [[bool(value) for value in row] for row in SAMPLE_LABYRINTH]
    path = find_path(grid, Cell(*args.start), Cell(*args.end))
    if path is None:
        print("No path exists")
    else:
        print("Path exists")
        print(format_path(path))
    return 0