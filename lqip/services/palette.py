# lqip/services/palette.py
from __future__ import annotations
from typing import Dict, List, Mapping
import asyncio
import logging

import colorgram
from pydantic import BaseModel, ConfigDict, Field

from ..config import settings
from ..errors import PaletteError
from ..guard import install_failure_guard
from ..utils import PathLike

logger = logging.getLogger(__name__)

# colorgram reports a 0..1 share of the sampled pixels; scale it to an integer count
POPULATION_SCALE = 10_000


class SwatchColor(BaseModel):
    """One named bucket of similar colours."""

    model_config = ConfigDict(frozen=True)

    population: int = Field(ge=0)
    hex: str = Field(pattern=r"^#[0-9A-Fa-f]{6}$")


Swatch = Mapping[str, SwatchColor]


def _to_swatch(colors: List[colorgram.Color]) -> Dict[str, SwatchColor]:
    swatch: Dict[str, SwatchColor] = {}
    for i, color in enumerate(colors, start=1):
        r, g, b = color.rgb
        swatch[f"Color{i}"] = SwatchColor(
            population=round(color.proportion * POPULATION_SCALE),
            hex=f"#{r:02x}{g:02x}{b:02x}",
        )
    return swatch


def read_swatch(file_path: PathLike) -> Dict[str, SwatchColor]:
    """Run colorgram on ``file_path`` and return its colours keyed by bucket name."""
    colors = colorgram.extract(file_path, settings.PALETTE_COLOR_COUNT)
    return _to_swatch(colors)


def to_palette(swatch: Swatch) -> List[str]:
    """
    Flatten a swatch into hex strings, most popular first.

    Args:
        swatch (Swatch): Bucket name to ``SwatchColor``.

    Returns:
        List[str]: Hex colours; equal populations keep the swatch order.
    """
    colors = sorted(swatch.values(), key=lambda color: color.population, reverse=True)
    return [color.hex for color in colors]


async def extract_palette(file_path: PathLike) -> List[str]:
    """
    Extract the dominant colours of an image.

    The path is handed to colorgram without an extension check, so any
    format Pillow can open is accepted here.

    Args:
        file_path (PathLike): Path to the image.

    Returns:
        List[str]: ``#rrggbb`` strings ordered from most to least popular.

    Raises:
        PaletteError: colorgram found no colours.
    """
    install_failure_guard()
    swatch = await asyncio.to_thread(read_swatch, file_path)
    if not swatch:
        raise PaletteError()

    palette = to_palette(swatch)
    logger.debug("Extracted %d colours from %s", len(palette), file_path)
    return palette
