# tests/test_thumbs.py
from __future__ import annotations

import base64
import re
from io import BytesIO

import pytest
from PIL import Image, UnidentifiedImageError

from lqip import EncodingError, UnsupportedFormatError, encode_thumbnail
from lqip.errors import ERROR_EXT
from lqip.services import thumbs

DATA_URI_RE = re.compile(r"^data:image/(jpeg|png);base64,[A-Za-z0-9+/=]+$")


def _decode(uri: str) -> Image.Image:
    payload = uri.split(",", 1)[1]
    return Image.open(BytesIO(base64.b64decode(payload)))


@pytest.mark.asyncio
async def test_png_thumbnail(make_image) -> None:
    path = make_image("photo.png", size=(64, 32))

    uri = await encode_thumbnail(path)

    assert uri.startswith("data:image/png;base64,")
    assert DATA_URI_RE.match(uri)
    im = _decode(uri)
    assert im.format == "PNG"
    assert im.size == (14, 7)


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["photo.jpg", "photo.jpeg"])
async def test_jpeg_thumbnail(make_image, name: str) -> None:
    path = make_image(name, size=(100, 37), fmt="JPEG")

    uri = await encode_thumbnail(str(path))

    assert uri.startswith("data:image/jpeg;base64,")
    assert DATA_URI_RE.match(uri)
    im = _decode(uri)
    assert im.format == "JPEG"
    assert im.size == (14, 5)


@pytest.mark.asyncio
async def test_small_images_are_enlarged(make_image) -> None:
    path = make_image("tiny.png", size=(7, 7))

    im = _decode(await encode_thumbnail(path))

    assert im.size == (14, 14)


@pytest.mark.asyncio
async def test_alpha_source_saved_as_jpeg(tmp_path) -> None:
    path = tmp_path / "alpha.jpg"
    Image.new("RGBA", (28, 28), (0, 128, 255, 100)).save(path, format="PNG")

    uri = await encode_thumbnail(path)

    assert uri.startswith("data:image/jpeg;base64,")
    assert _decode(uri).mode == "RGB"


@pytest.mark.asyncio
async def test_custom_width(make_image) -> None:
    path = make_image("photo.png", size=(64, 32))

    im = _decode(await encode_thumbnail(path, width=20))

    assert im.size == (20, 10)


@pytest.mark.asyncio
async def test_non_positive_width(make_image) -> None:
    path = make_image("photo.png")

    with pytest.raises(ValueError):
        await encode_thumbnail(path, width=0)


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["photo.gif", "noext", "photo.PNG", "photo.png.bak"])
async def test_unsupported_never_opens_file(monkeypatch, name: str) -> None:
    def _fail(*args, **kwargs):
        raise AssertionError("image collaborator must not be called")

    monkeypatch.setattr(thumbs, "make_thumb_bytes", _fail)

    with pytest.raises(UnsupportedFormatError) as exc:
        await encode_thumbnail(name)
    assert str(exc.value) == ERROR_EXT


@pytest.mark.asyncio
async def test_empty_encode_result(monkeypatch, make_image) -> None:
    path = make_image("photo.png")
    monkeypatch.setattr(thumbs, "make_thumb_bytes", lambda *args: b"")

    with pytest.raises(EncodingError, match="unexpected empty encode result"):
        await encode_thumbnail(path)


@pytest.mark.asyncio
async def test_corrupt_file_propagates(tmp_path) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")

    with pytest.raises(UnidentifiedImageError):
        await encode_thumbnail(path)


@pytest.mark.asyncio
async def test_missing_file_propagates(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        await encode_thumbnail(tmp_path / "missing.jpg")


@pytest.mark.asyncio
async def test_repeat_calls_match(make_image) -> None:
    path = make_image("photo.jpg", size=(120, 80), accent=(0, 0, 255), fmt="JPEG")

    assert await encode_thumbnail(path) == await encode_thumbnail(path)
