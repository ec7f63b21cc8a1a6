"""POST /api/answer-key — cell references still to colour."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from qrgrid.api.limits import check_content, request_level
from qrgrid.config import Settings
from qrgrid.dependencies import get_matrix_provider, get_settings
from qrgrid.engine.pipeline import compute_answer_key
from qrgrid.engine.provider import MatrixProvider
from qrgrid.models.requests import AnswerKeyRequest
from qrgrid.models.responses import AnswerKeyResponse

router = APIRouter()


@router.post("/answer-key", response_model=AnswerKeyResponse)
async def answer_key(
    req: AnswerKeyRequest,
    settings: Settings = Depends(get_settings),
    provider: MatrixProvider = Depends(get_matrix_provider),
) -> AnswerKeyResponse:
    check_content(req.content, settings)
    elements = compute_answer_key(
        req.content,
        request_level(req, settings),
        req.prefill_percent,
        provider=provider,
    )
    return AnswerKeyResponse(elements=elements, text=" ".join(elements), count=len(elements))
