"""Low-quality image placeholders: tiny base64 thumbnails and dominant-colour palettes."""

__version__ = "1.0.0"

from .errors import (  # noqa: E402
    EmptyResultError,
    EncodingError,
    LqipError,
    PaletteError,
    UnsupportedFormatError,
)
from .guard import install_failure_guard  # noqa: E402
from .services.palette import SwatchColor, extract_palette, to_palette  # noqa: E402
from .services.thumbs import encode_thumbnail  # noqa: E402

__all__ = [
    "__version__",
    "encode_thumbnail",
    "extract_palette",
    "to_palette",
    "install_failure_guard",
    "SwatchColor",
    "LqipError",
    "UnsupportedFormatError",
    "EmptyResultError",
    "EncodingError",
    "PaletteError",
]
