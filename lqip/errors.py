# lqip/errors.py
from __future__ import annotations

from . import __version__

ERROR_EXT = f"Error: Input file is missing or of an unsupported image format lqip v{__version__}"


class LqipError(Exception):
    """Base class for errors raised by lqip itself.

    Failures coming from Pillow or colorgram (corrupt file, unreadable path)
    are not wrapped and reach the caller as-is.
    """


class UnsupportedFormatError(LqipError, ValueError):
    """The file has no extension or one outside ``SUPPORTED_MIMES``."""

    def __init__(self, message: str = ERROR_EXT):
        super().__init__(message)


class EmptyResultError(LqipError):
    """A collaborator finished without error but gave back nothing usable."""


class EncodingError(EmptyResultError):
    def __init__(self, message: str = "unexpected empty encode result"):
        super().__init__(message)


class PaletteError(EmptyResultError):
    def __init__(self, message: str = "unexpected empty palette result"):
        super().__init__(message)
