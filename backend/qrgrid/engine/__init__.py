"""QR grid engine: column naming, matrix normalization, prefill selection."""

from qrgrid.engine.answer_key import (
    AnswerCheck,
    CellReference,
    build_answer_key,
    check_answers,
    format_answer_key,
)
from qrgrid.engine.columns import column_index, column_name, generate_column_names
from qrgrid.engine.errors import (
    EncodingError,
    InvalidIndex,
    InvalidLength,
    InvalidLevel,
    MalformedMatrix,
    QrGridError,
)
from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.engine.pipeline import (
    Puzzle,
    build_puzzle,
    compute_answer_key,
    compute_prefill_indices,
    render_grid,
)
from qrgrid.engine.prefill import select_prefill

__all__ = [
    "AnswerCheck",
    "CellReference",
    "check_answers",
    "build_answer_key",
    "format_answer_key",
    "column_index",
    "column_name",
    "generate_column_names",
    "EncodingError",
    "InvalidIndex",
    "InvalidLength",
    "InvalidLevel",
    "MalformedMatrix",
    "QrGridError",
    "ModuleMatrix",
    "Puzzle",
    "build_puzzle",
    "compute_answer_key",
    "compute_prefill_indices",
    "render_grid",
    "select_prefill",
]
