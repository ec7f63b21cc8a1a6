"""Shared test fixtures."""

from __future__ import annotations

import pytest

from qrgrid.engine.matrix import ModuleMatrix


# Fixed matrices (row-major) so selection vectors don't depend on the QR encoder

FULL_2X2 = [
    [True, True],
    [True, True],
]

# Active flat indices 0, 2, 4, 5, 7, 8
SPARSE_3X3 = [
    [True, False, True],
    [False, True, True],
    [False, True, True],
]

# Active flat indices 0..7, index 8 inactive
NEARLY_FULL_3X3 = [
    [True, True, True],
    [True, True, True],
    [True, True, False],
]

# Active flat indices 0..9
TEN_ACTIVE_4X4 = [
    [True, True, True, True],
    [True, True, True, True],
    [True, True, False, False],
    [False, False, False, False],
]

EMPTY_2X2 = [
    [False, False],
    [False, False],
]


class FixedProvider:
    """Matrix provider that ignores content and level."""

    def __init__(self, rows: list[list[bool]]) -> None:
        self.matrix = ModuleMatrix.from_rows(rows)
        self.calls: list[tuple[str, str]] = []

    def encode(self, content: str, level: str) -> ModuleMatrix:
        self.calls.append((content, level))
        return self.matrix


@pytest.fixture
def full_2x2() -> ModuleMatrix:
    return ModuleMatrix.from_rows(FULL_2X2)


@pytest.fixture
def sparse_3x3() -> ModuleMatrix:
    return ModuleMatrix.from_rows(SPARSE_3X3)


@pytest.fixture
def full_provider() -> FixedProvider:
    return FixedProvider(FULL_2X2)


@pytest.fixture
def sparse_provider() -> FixedProvider:
    return FixedProvider(SPARSE_3X3)


def require_cairo() -> None:
    """Skip when cairosvg or its native cairo library is missing."""
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")
