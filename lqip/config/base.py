# lqip/config/base.py
from __future__ import annotations
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    # ===== Thumbnail =====
    THUMB_WIDTH: int = Field(14, ge=1)  # px, height follows the aspect ratio
    JPEG_QUALITY: int = Field(80, ge=1, le=95)

    # ===== Palette =====
    PALETTE_COLOR_COUNT: int = Field(6, ge=1)

    # Pydantic v2
    model_config = SettingsConfigDict(
        env_prefix="LQIP_",
        env_file_encoding="utf-8",
        extra="ignore",
    )
