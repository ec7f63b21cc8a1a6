"""Answer key: active cells still left to colour, in row-major order."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass

from qrgrid.engine.columns import column_index
from qrgrid.engine.errors import InvalidIndex, InvalidLength
from qrgrid.engine.matrix import ModuleMatrix

_REFERENCE_RE = re.compile(r"^([A-Z]+)([1-9][0-9]*)$")


@dataclass(frozen=True)
class CellReference:
    """Column label + 1-based row, serialized as e.g. "A1"."""

    label: str
    row: int

    def __str__(self) -> str:
        return f"{self.label}{self.row}"

    @classmethod
    def parse(cls, text: str) -> CellReference:
        m = _REFERENCE_RE.match(text.strip())
        if not m:
            raise InvalidIndex(f"Not a cell reference: {text!r}")
        return cls(label=m.group(1), row=int(m.group(2)))

    def to_position(self) -> tuple[int, int]:
        """0-based (row, col)."""
        return self.row - 1, column_index(self.label)


def build_answer_key(
    matrix: ModuleMatrix,
    labels: Sequence[str],
    prefill: Collection[int] = frozenset(),
) -> list[CellReference]:
    """References of every active cell not in `prefill`, row outer, column inner."""
    n = matrix.size
    if len(labels) < n:
        raise InvalidLength(f"Need {n} column labels, got {len(labels)}")

    refs: list[CellReference] = []
    for r, c, active in matrix:
        if active and matrix.flat_index(r, c) not in prefill:
            refs.append(CellReference(labels[c], r + 1))
    return refs


def format_answer_key(refs: Sequence[CellReference], sep: str = " ") -> str:
    return sep.join(str(ref) for ref in refs)


@dataclass(frozen=True)
class AnswerCheck:
    """Outcome of comparing a solver's coloured cells with the answer key."""

    correct: list[CellReference]
    missing: list[CellReference]
    extra: list[CellReference]
    prefilled: list[CellReference]

    @property
    def complete(self) -> bool:
        return not self.missing and not self.extra


def check_answers(
    matrix: ModuleMatrix,
    labels: Sequence[str],
    prefill: Collection[int],
    submitted: Iterable[str],
) -> AnswerCheck:
    """Compare submitted references ("A1", "C2", ...) with the answer key.

    Duplicates count once. Cells outside the grid or inactive are extra;
    prefilled cells are reported separately and never count against the solver.
    """
    expected = build_answer_key(matrix, labels, prefill)
    seen: set[CellReference] = set()
    extra: list[CellReference] = []
    prefilled: list[CellReference] = []
    for text in submitted:
        ref = CellReference.parse(text)
        if ref in seen:
            continue
        seen.add(ref)
        row, col = ref.to_position()
        if row >= matrix.size or col >= matrix.size or not matrix.get(row, col):
            extra.append(ref)
        elif matrix.flat_index(row, col) in prefill:
            prefilled.append(ref)

    correct = [ref for ref in expected if ref in seen]
    missing = [ref for ref in expected if ref not in seen]
    return AnswerCheck(correct=correct, missing=missing, extra=extra, prefilled=prefilled)
