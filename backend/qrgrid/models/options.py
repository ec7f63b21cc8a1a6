"""Grid render options."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from qrgrid.utils.math_helpers import clamp_percent

ErrorCorrectionLevel = Literal["L", "M", "Q", "H"]


class GridRenderOptions(BaseModel):
    """Layout and colouring of the grid template. Accepts camelCase keys too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    error_correction_level: ErrorCorrectionLevel = "L"
    cell_size: float = Field(default=20, gt=0, description="Edge length of one cell in px")
    stroke_color: str = "#cbd5e1"
    label_color: str = "#111827"
    label_font_size: float = Field(default=12, gt=0)
    padding: float = Field(default=8, ge=0)
    prefill_percent: float = Field(default=0, description="Clamped to [0, 100]")

    # Extras beyond the core layout
    stroke_width: float = Field(default=1, ge=0)
    prefill_color: str = "#111827"
    show_pattern: bool = Field(default=False, description="Tint active cells that are still to be coloured")
    pattern_color: str = "#94a3b8"

    @field_validator("error_correction_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("prefill_percent", mode="before")
    @classmethod
    def _clamp_percent(cls, v: object) -> float:
        return clamp_percent(v)  # type: ignore[arg-type]
