"""POST /api/prefill — raw prefill selection over a caller-supplied matrix."""

from __future__ import annotations

from fastapi import APIRouter

from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.engine.pipeline import compute_prefill_indices
from qrgrid.models.requests import PrefillRequest
from qrgrid.models.responses import PrefillResponse

router = APIRouter()


@router.post("/prefill", response_model=PrefillResponse)
async def prefill(req: PrefillRequest) -> PrefillResponse:
    if req.orientation == "columns":
        matrix = ModuleMatrix.from_columns(req.matrix)
    else:
        matrix = ModuleMatrix.from_rows(req.matrix)

    indices = compute_prefill_indices(
        matrix,
        req.content,
        req.error_correction_level,
        req.prefill_percent,
    )
    return PrefillResponse(indices=sorted(indices), active_count=matrix.active_count)
