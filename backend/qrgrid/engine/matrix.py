"""ModuleMatrix — the one place provider matrices are normalized.

Everything downstream (selection, rendering, answer key) reads cells as
matrix.get(row, col). Providers that index modules[col][row] go through
from_columns(), which transposes once here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from qrgrid.engine.errors import MalformedMatrix

logger = logging.getLogger(__name__)


class ModuleMatrix:
    """Immutable N×N boolean grid, row-major. True = active (dark) module."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Any) -> None:
        try:
            cells = np.asarray(cells)
        except ValueError as e:
            raise MalformedMatrix(f"Module matrix rows are inconsistent: {e}") from e
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise MalformedMatrix(f"Module matrix must be square, got shape {cells.shape}")
        cells = np.array(cells, dtype=bool, copy=True)
        cells.setflags(write=False)
        self._cells = cells

    # ── Construction ──

    @classmethod
    def from_rows(cls, rows: Any) -> ModuleMatrix:
        """Build from rows[r][c]."""
        if isinstance(rows, ModuleMatrix):
            return cls(rows._cells)
        return cls(_to_square_array(rows))

    @classmethod
    def from_columns(cls, columns: Any) -> ModuleMatrix:
        """Build from columns[c][r] (column-major providers)."""
        if isinstance(columns, ModuleMatrix):
            return cls(columns._cells)
        return cls(_to_square_array(columns).T)

    @classmethod
    def empty(cls) -> ModuleMatrix:
        return cls(np.zeros((0, 0), dtype=bool))

    # ── Access ──

    @property
    def size(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cells(self) -> NDArray[np.bool_]:
        """Read-only view of the underlying array."""
        return self._cells

    def get(self, row: int, col: int) -> bool:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) outside {self.size}x{self.size} matrix")
        return bool(self._cells[row, col])

    def flat_index(self, row: int, col: int) -> int:
        return row * self.size + col

    def active_indices(self) -> list[int]:
        """Flattened indices of active cells, row-major (row outer, column inner)."""
        return [int(i) for i in np.flatnonzero(self._cells)]

    @property
    def active_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def rows(self) -> list[list[bool]]:
        return self._cells.tolist()

    def __iter__(self) -> Iterator[tuple[int, int, bool]]:
        """Yield (row, col, active) in row-major order."""
        n = self.size
        for r in range(n):
            for c in range(n):
                yield r, c, bool(self._cells[r, c])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleMatrix):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self.size, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"ModuleMatrix(size={self.size}, active={self.active_count})"


def _to_square_array(data: Any) -> NDArray[np.bool_]:
    """Validate nested rows (or a 2-D array) and return a bool array."""
    if isinstance(data, np.ndarray):
        if data.ndim == 1 and data.size == 0:
            return np.zeros((0, 0), dtype=bool)
        if data.ndim != 2:
            raise MalformedMatrix(f"Module matrix must be 2-dimensional, got {data.ndim} dimensions")
        if data.shape[0] != data.shape[1]:
            raise MalformedMatrix(f"Module matrix must be square, got shape {data.shape}")
        return data.astype(bool)

    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise MalformedMatrix(f"Module matrix must be a sequence of rows, got {type(data).__name__}")

    size = len(data)
    for i, row in enumerate(data):
        if not isinstance(row, (Sequence, np.ndarray)) or isinstance(row, (str, bytes)):
            raise MalformedMatrix(f"Row {i} is not a sequence")
        if len(row) != size:
            raise MalformedMatrix(f"Row {i} has {len(row)} entries, expected {size}")
        for j, v in enumerate(row):
            if isinstance(v, (Sequence, np.ndarray)) and not isinstance(v, str):
                raise MalformedMatrix(f"Cell ({i}, {j}) is a sequence; matrix must be 2-dimensional")

    if size == 0:
        return np.zeros((0, 0), dtype=bool)

    logger.debug("Normalized %dx%d module matrix", size, size)
    return np.array([[bool(v) for v in row] for row in data], dtype=bool)
