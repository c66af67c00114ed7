# lqip/config/__init__.py
from __future__ import annotations
import logging

from .base import BaseConfig

logger = logging.getLogger(__name__)


class Settings(BaseConfig):
    model_config = BaseConfig.model_config.copy()
    model_config.update(env_file=".env")


settings = Settings()

logger.debug(
    "Loaded lqip config | THUMB_WIDTH=%s JPEG_QUALITY=%s PALETTE_COLOR_COUNT=%s",
    settings.THUMB_WIDTH,
    settings.JPEG_QUALITY,
    settings.PALETTE_COLOR_COUNT,
)
