"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qrgrid.config import settings
from qrgrid.engine.errors import QrGridError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.qrgrid_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _qrgrid_error_handler(request: Request, exc: QrGridError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="QR Grid",
        description="QR colour-by-numbers — labelled grid templates and answer keys",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(QrGridError, _qrgrid_error_handler)

    from qrgrid.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
