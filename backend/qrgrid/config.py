"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    qrgrid_env: str = "development"
    qrgrid_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Used when a request leaves these unset
    default_level: Literal["L", "M", "Q", "H"] = "L"
    default_cell_size: float = Field(default=20, gt=0)

    # Request limits
    # Byte-mode capacity of a version 40-L symbol
    max_content_length: int = 2953
    max_png_scale: float = 4.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
