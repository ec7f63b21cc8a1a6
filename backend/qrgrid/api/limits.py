"""Request limits and server-side defaults shared by the encoding endpoints."""

from __future__ import annotations

from pydantic import BaseModel

from qrgrid.config import Settings
from qrgrid.engine.errors import EncodingError
from qrgrid.models.options import GridRenderOptions


def check_content(content: str, settings: Settings) -> None:
    if len(content) > settings.max_content_length:
        raise EncodingError(
            f"Content is {len(content)} characters, limit is {settings.max_content_length}"
        )


def request_level(req: BaseModel, settings: Settings) -> str:
    """The requested level, or the configured default when the client sent none."""
    if "error_correction_level" in req.model_fields_set:
        return req.error_correction_level  # type: ignore[attr-defined]
    return settings.default_level


def with_defaults(options: GridRenderOptions, settings: Settings) -> GridRenderOptions:
    """Fill level and cell size from settings where the client left them unset."""
    update = {}
    if "error_correction_level" not in options.model_fields_set:
        update["error_correction_level"] = settings.default_level
    if "cell_size" not in options.model_fields_set:
        update["cell_size"] = settings.default_cell_size
    return options.model_copy(update=update) if update else options
