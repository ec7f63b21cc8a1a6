"""Entry points: content in, grid template and answer key out.

Both outputs of a request come from the same matrix and the same prefill
selection, so the printed template and its answer key always agree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from qrgrid.engine.answer_key import (
    AnswerCheck,
    CellReference,
    build_answer_key,
    check_answers,
    format_answer_key,
)
from qrgrid.engine.columns import generate_column_names
from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.engine.prefill import select_prefill
from qrgrid.engine.provider import MatrixProvider, get_provider, normalize_level
from qrgrid.models.options import GridRenderOptions
from qrgrid.svg.grid import render_grid_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Puzzle:
    """Everything derived from one (content, options) request."""

    content: str
    options: GridRenderOptions
    matrix: ModuleMatrix
    labels: list[str]
    prefill: frozenset[int]
    svg: str
    answer_key: list[CellReference] = field(default_factory=list)

    @property
    def answer_key_text(self) -> str:
        return format_answer_key(self.answer_key)

    def check(self, submitted: Iterable[str]) -> AnswerCheck:
        """Grade a solver's coloured cells against this puzzle."""
        return check_answers(self.matrix, self.labels, self.prefill, submitted)


def _as_options(options: GridRenderOptions | Mapping[str, Any] | None) -> GridRenderOptions:
    if options is None:
        return GridRenderOptions()
    if isinstance(options, GridRenderOptions):
        return options
    return GridRenderOptions.model_validate(dict(options))


def compute_prefill_indices(
    matrix: ModuleMatrix | Any,
    content: str,
    level: str,
    percent: float,
) -> frozenset[int]:
    """Selection entry point. Raw row-major nested lists are accepted too."""
    if not isinstance(matrix, ModuleMatrix):
        matrix = ModuleMatrix.from_rows(matrix)
    return select_prefill(matrix, content, level, percent)


def build_puzzle(
    content: str,
    options: GridRenderOptions | Mapping[str, Any] | None = None,
    provider: MatrixProvider | None = None,
) -> Puzzle:
    opts = _as_options(options)
    level = normalize_level(opts.error_correction_level)

    matrix = (provider or get_provider()).encode(content, level)
    labels = generate_column_names(matrix.size)
    prefill = select_prefill(matrix, content, level, opts.prefill_percent)
    svg = render_grid_svg(matrix, labels, prefill, opts)
    answer_key = build_answer_key(matrix, labels, prefill)

    logger.info(
        "Built %dx%d puzzle: %d active, %d prefilled, %d to colour",
        matrix.size, matrix.size, matrix.active_count, len(prefill), len(answer_key),
    )
    return Puzzle(
        content=content,
        options=opts,
        matrix=matrix,
        labels=labels,
        prefill=prefill,
        svg=svg,
        answer_key=answer_key,
    )


def render_grid(
    content: str,
    options: GridRenderOptions | Mapping[str, Any] | None = None,
    provider: MatrixProvider | None = None,
) -> str:
    """Grid template SVG for `content`."""
    return build_puzzle(content, options, provider).svg


def compute_answer_key(
    content: str,
    level: str = "L",
    prefill_percent: float = 0,
    provider: MatrixProvider | None = None,
) -> list[str]:
    """Cell references still to colour, e.g. ["A1", "C1", ...]."""
    level = normalize_level(level)
    matrix = (provider or get_provider()).encode(content, level)
    labels = generate_column_names(matrix.size)
    prefill = select_prefill(matrix, content, level, prefill_percent)
    return [str(ref) for ref in build_answer_key(matrix, labels, prefill)]
