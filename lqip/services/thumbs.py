# lqip/services/thumbs.py
from __future__ import annotations
from io import BytesIO
import asyncio
import logging

from PIL import Image, ImageOps

from ..config import settings
from ..errors import EncodingError
from ..guard import install_failure_guard
from ..utils import PIL_FORMATS, SUPPORTED_MIMES, PathLike, to_data_uri, validate_format

logger = logging.getLogger(__name__)

# modes the JPEG encoder refuses
JPEG_UNSAVABLE_MODES = ("P", "PA", "RGBA", "LA", "I;16", "I", "F")


def _normalize(img: Image.Image, pil_format: str) -> Image.Image:
    im = ImageOps.exif_transpose(img)
    if pil_format == "JPEG" and im.mode in JPEG_UNSAVABLE_MODES:
        im = im.convert("RGB")
    return im


def _resize_width(img: Image.Image, width: int) -> Image.Image:
    w, h = img.size
    height = max(1, round(h * width / w))
    return img.resize((width, height), Image.Resampling.LANCZOS)


def make_thumb_bytes(file_path: PathLike, extension: str, width: int) -> bytes:
    """Decode ``file_path``, scale it to ``width`` and re-encode it in its own format family."""
    pil_format = PIL_FORMATS[extension]
    with Image.open(file_path) as img:
        im = _resize_width(_normalize(img, pil_format), width)
        buf = BytesIO()
        if pil_format == "JPEG":
            im.save(buf, format="JPEG", quality=settings.JPEG_QUALITY)
        else:
            im.save(buf, format="PNG", optimize=True)
        return buf.getvalue()


async def encode_thumbnail(file_path: PathLike, width: int | None = None) -> str:
    """
    Build a base64 placeholder image ready for ``<img src>`` or CSS ``url()``.

    Args:
        file_path (PathLike): A ``.jpg``, ``.jpeg`` or ``.png`` file.
        width (int | None): Target width in px, ``settings.THUMB_WIDTH`` when omitted.

    Returns:
        str: ``data:image/<jpeg|png>;base64,...``

    Raises:
        UnsupportedFormatError: Extension missing or unsupported; the file is not opened.
        EncodingError: Pillow produced an empty buffer.
    """
    extension = validate_format(file_path)
    if width is None:
        width = settings.THUMB_WIDTH
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    install_failure_guard()
    data = await asyncio.to_thread(make_thumb_bytes, file_path, extension, width)
    if not data:
        raise EncodingError()

    logger.debug("Encoded %s thumbnail for %s (%d bytes)", extension, file_path, len(data))
    return to_data_uri(SUPPORTED_MIMES[extension], data)
