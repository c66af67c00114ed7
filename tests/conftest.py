# tests/conftest.py
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path: Path):
    """Write a solid image, optionally with a second colour on its right quarter."""

    def _make(name: str, size=(64, 32), color=(255, 0, 0), accent=None, fmt=None) -> Path:
        path = tmp_path / name
        im = Image.new("RGB", size, color)
        if accent is not None:
            w, h = size
            im.paste(accent, (w - w // 4, 0, w, h))
        im.save(path, format=fmt)
        return path

    return _make
