"""POST /api/qr/svg — plain QR code SVG."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from qrgrid.api.limits import check_content, request_level
from qrgrid.config import Settings
from qrgrid.dependencies import get_matrix_provider, get_settings
from qrgrid.engine.provider import MatrixProvider
from qrgrid.models.requests import QrSvgRequest
from qrgrid.svg.symbol import generate_qr_svg

router = APIRouter(prefix="/qr")


@router.post("/svg")
async def qr_svg(
    req: QrSvgRequest,
    settings: Settings = Depends(get_settings),
    provider: MatrixProvider = Depends(get_matrix_provider),
) -> Response:
    check_content(req.content, settings)
    svg = generate_qr_svg(
        req.content,
        request_level(req, settings),
        size=req.size,
        fill=req.fill,
        background=req.background,
        provider=provider,
    )
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": 'attachment; filename="qr.svg"'},
    )
