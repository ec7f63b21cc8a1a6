"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from qrgrid.api import answer_key, grid, health, prefill, qr

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(grid.router)
api_router.include_router(answer_key.router)
api_router.include_router(prefill.router)
api_router.include_router(qr.router)
