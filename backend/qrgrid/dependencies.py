"""FastAPI dependency injection."""

from __future__ import annotations

from qrgrid.config import Settings, settings
from qrgrid.engine.provider import MatrixProvider, get_provider


def get_settings() -> Settings:
    return settings


def get_matrix_provider() -> MatrixProvider:
    return get_provider()
