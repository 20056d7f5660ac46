"""Random maze generation by depth-first carving."""

from __future__ import annotations

import argparse
import random
from enum import Enum

WALL = "@"
EMPTY = "-"
LIMIT = "="


class Direction(Enum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def offset(self) -> tuple[int, int]:
        """Row and column step of this direction."""
        return {
            Direction.NORTH: (-1, 0),
            Direction.SOUTH: (1, 0),
            Direction.EAST: (0, 1),
            Direction.WEST: (0, -1),
        }[self]


class Maze:
    """A grid maze; ``grid[row][col]`` is True for a wall."""

    def __init__(self, height: int, width: int, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.height = height
        self.width = width
        self.grid: list[list[bool]] = []
        self.generate(height, width)

    def reset(self, height: int, width: int) -> None:
        """Make a ``height`` x ``width`` grid made only of walls."""
        self.height = height
        self.width = width
        self.grid = [[True] * width for _ in range(height)]

    def generate(self, height: int, width: int) -> None:
        """Build a new maze carved from the top-left cell."""
        if height < 1 or width < 1:
            raise ValueError("maze dimensions must be positive")
        self.reset(height, width)
        self._carve(0, 0)

    def in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _shuffled_directions(self):
        order = list(Direction)
        self._rng.shuffle(order)
        return iter(order)

    def _carve(self, row: int, col: int) -> None:
        self.grid[row][col] = False
        pending = [(row, col, self._shuffled_directions())]
        while pending:
            r, c, directions = pending[-1]
            for direction in directions:
                dr, dc = direction.offset
                nr, nc = r + 2 * dr, c + 2 * dc
                if self.in_range(nr, nc) and self.grid[nr][nc]:
                    self.grid[r + dr][c + dc] = False
                    self.grid[nr][nc] = False
                    pending.append((nr, nc, self._shuffled_directions()))
                    break
            else:
                pending.pop()

    def render(self) -> str:
        """Text picture of the maze with a frame."""
        border = " " + LIMIT * self.width + " "
        rows = ("|" + "".join(WALL if cell else EMPTY for cell in row) + "|" for row in self.grid)
        lines = [f" Maze ( {self.height} x {self.width} ) ", border, *rows, border]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()


def main(argv: list[str] | None = None) -> int:
    """Generate and print a maze."""
    parser = argparse.ArgumentParser(description="Print a random maze.")
    parser.add_argument("height", type=int, nargs="?", default=21)
    parser.add_argument("width", type=int, nargs="?", default=21)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    maze = Maze(args.height, args.width, random.Random(args.seed))
    print(maze.render(), end="")
    return 0