"""A dense float32 matrix of row vectors, loadable from ``.npy`` files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike


def read_npy(path: str | Path) -> np.ndarray:
    """Load a two-dimensional array from a ``.npy`` file as float32."""
    array = np.load(path, allow_pickle=False)
    if array.ndim != 2:
        raise ValueError(f"expected a 2-D array, got {array.ndim} dimension(s)")
    return np.ascontiguousarray(array, dtype=np.float32)


class Matrix:
    """``n`` row vectors of dimension ``dim`` stored as float32."""

    def __init__(self, n: int = 0, dim: int = 0, *, data: ArrayLike | None = None) -> None:
        if data is None:
            self.data = np.zeros((n, dim), dtype=np.float32)
        else:
            array = np.array(data, dtype=np.float32)
            if array.ndim != 2:
                raise ValueError("matrix data must be two-dimensional")
            self.data = array

    @classmethod
    def from_npy(cls, path: str | Path) -> Matrix:
        """Build a matrix from a ``.npy`` file."""
        return cls(data=read_npy(path))

    @property
    def n(self) -> int:
        return self.data.shape[0]

    @property
    def dim(self) -> int:
        return self.data.shape[1]

    def randomize(self, rng: np.random.Generator | None = None) -> None:
        """Fill every entry with a uniform value in ``[0, 1)``."""
        generator = rng if rng is not None else np.random.default_rng()
        self.data[...] = generator.random(self.data.shape, dtype=np.float32)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexError(f"row {index} out of range for {self.n} rows")

    def row(self, index: int) -> np.ndarray:
        """Read-only view of row ``index``."""
        self._check_index(index)
        view = self.data[index]
        view.flags.writeable = False
        return view

    def set_row(self, index: int, vector: ArrayLike) -> None:
        """Overwrite row ``index`` with ``vector``."""
        self._check_index(index)
        values = np.asarray(vector, dtype=np.float32).ravel()
        if values.size != self.dim:
            raise ValueError(f"expected {self.dim} values, got {values.size}")
        self.data[index] = values

    def __str__(self) -> str:
        rows = "".join(
            "[" + ", ".join(f"{value:g}" for value in row) + "],\n" for row in self.data
        )
        return f"[{rows}]\n"