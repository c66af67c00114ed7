import base64
import os
from pathlib import Path
from typing import Union

from .errors import UnsupportedFormatError


# supported images aka mimetypes
SUPPORTED_MIMES = {
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "png": "image/png",
}

# Pillow format used to re-encode each supported extension
PIL_FORMATS = {
    "jpeg": "JPEG",
    "jpg": "JPEG",
    "png": "PNG",
}

PathLike = Union[str, os.PathLike]


def get_extension(file_path: PathLike) -> str:
    """
    Return the raw extension of a file path, without the leading dot.

    The extension is taken after the last dot of the file name and is not
    lowercased. Names without a dot, and dot-files such as ``.png``, give an
    empty string.

    Args:
        file_path (PathLike): Absolute or relative path.

    Returns:
        str: Extension such as ``"jpg"``, or ``""``.
    """
    return Path(file_path).suffix[1:]


def validate_format(file_path: PathLike) -> str:
    """
    Check that a file path carries a supported image extension.

    Args:
        file_path (PathLike): Path to the image.

    Returns:
        str: The validated extension.

    Raises:
        UnsupportedFormatError: If the extension is missing or unsupported.
    """
    extension = get_extension(file_path)
    if extension not in SUPPORTED_MIMES:
        raise UnsupportedFormatError()
    return extension


def to_data_uri(mime_type: str, data: bytes) -> str:
    """
    Format binary content as a ``data:`` URI usable in ``<img src>`` or CSS.

    Args:
        mime_type (str): Mime type, e.g. ``"image/png"``.
        data (bytes): Raw content.

    Returns:
        str: ``data:<mime>;base64,<payload>``.
    """
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
