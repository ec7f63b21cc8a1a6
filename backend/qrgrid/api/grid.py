"""POST /api/grid — grid template + answer key, plus SVG/PNG downloads."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from qrgrid.api.limits import check_content, with_defaults
from qrgrid.config import Settings
from qrgrid.dependencies import get_matrix_provider, get_settings
from qrgrid.engine.pipeline import Puzzle, build_puzzle
from qrgrid.engine.provider import MatrixProvider
from qrgrid.models.requests import GridRequest
from qrgrid.models.responses import GridResponse
from qrgrid.svg.serializer import strip_xml_prolog
from qrgrid.utils.rasterizer import svg_to_png

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grid")


def _puzzle(req: GridRequest, settings: Settings, provider: MatrixProvider) -> Puzzle:
    check_content(req.content, settings)
    return build_puzzle(req.content, with_defaults(req.options, settings), provider)


@router.post("", response_model=GridResponse)
async def grid(
    req: GridRequest,
    settings: Settings = Depends(get_settings),
    provider: MatrixProvider = Depends(get_matrix_provider),
) -> GridResponse:
    puzzle = _puzzle(req, settings, provider)
    return GridResponse(
        svg=puzzle.svg,
        svg_inline=strip_xml_prolog(puzzle.svg),
        answer_key=[str(ref) for ref in puzzle.answer_key],
        size=puzzle.matrix.size,
        active_count=puzzle.matrix.active_count,
        prefill_count=len(puzzle.prefill),
    )


@router.post("/svg")
async def grid_svg(
    req: GridRequest,
    settings: Settings = Depends(get_settings),
    provider: MatrixProvider = Depends(get_matrix_provider),
) -> Response:
    puzzle = _puzzle(req, settings, provider)
    return Response(
        content=puzzle.svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": 'attachment; filename="qr-grid.svg"'},
    )


@router.post("/png")
async def grid_png(
    req: GridRequest,
    scale: float = Query(1.0, gt=0, description="Output pixels per SVG px"),
    settings: Settings = Depends(get_settings),
    provider: MatrixProvider = Depends(get_matrix_provider),
) -> Response:
    puzzle = _puzzle(req, settings, provider)
    scale = min(scale, settings.max_png_scale)
    png = svg_to_png(puzzle.svg, scale=scale)
    logger.debug("Rasterized grid at scale %.2f (%d bytes)", scale, len(png))
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": 'attachment; filename="qr-grid.png"'},
    )
