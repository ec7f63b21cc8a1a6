"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from qrgrid.models.options import ErrorCorrectionLevel, GridRenderOptions
from qrgrid.utils.math_helpers import clamp_percent


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GridRequest(_CamelModel):
    content: str = Field(..., min_length=1, description="Text or URL to encode")
    options: GridRenderOptions = Field(default_factory=GridRenderOptions)


class _SeededRequest(_CamelModel):
    error_correction_level: ErrorCorrectionLevel = "L"
    prefill_percent: float = Field(default=0, description="Clamped to [0, 100]")

    @field_validator("error_correction_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("prefill_percent", mode="before")
    @classmethod
    def _clamp_percent(cls, v: object) -> float:
        return clamp_percent(v)  # type: ignore[arg-type]


class AnswerKeyRequest(_SeededRequest):
    content: str = Field(..., min_length=1, description="Text or URL to encode")


class PrefillRequest(_SeededRequest):
    content: str = Field(default="", description="Seed text (the encoded content)")
    matrix: list[list[bool]] = Field(..., description="Square module matrix")
    orientation: Literal["rows", "columns"] = Field(
        default="rows",
        description="'rows' for matrix[row][col], 'columns' for matrix[col][row]",
    )


class QrSvgRequest(_CamelModel):
    content: str = Field(..., min_length=1, description="Text or URL to encode")
    error_correction_level: ErrorCorrectionLevel = "L"
    size: float = Field(default=256, gt=0, description="Edge length of the SVG in px")
    fill: str = "#000000"
    background: str = "#ffffff"

    @field_validator("error_correction_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v
