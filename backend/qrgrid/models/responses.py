"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class GridResponse(BaseModel):
    svg: str
    svg_inline: str = Field("", description="SVG without the XML declaration")
    answer_key: list[str] = Field(default_factory=list)
    size: int = 0
    active_count: int = 0
    prefill_count: int = 0


class AnswerKeyResponse(BaseModel):
    elements: list[str] = Field(default_factory=list)
    text: str = ""
    count: int = 0


class PrefillResponse(BaseModel):
    indices: list[int] = Field(default_factory=list)
    active_count: int = 0
