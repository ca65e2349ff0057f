import pytest
from PIL import Image


def _gradient(size, mode="RGB"):
    w, h = size
    img = Image.new("RGB", size)
    img.putdata([((x * 255) // max(w - 1, 1), (y * 255) // max(h - 1, 1), 128)
                 for y in range(h) for x in range(w)])
    return img.convert(mode) if mode != "RGB" else img


@pytest.fixture
def make_source(tmp_path):
    """Write a synthetic logo and return its path."""
    def _make(size=(300, 300), name="original_logo.png", fmt="PNG", mode="RGB"):
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _gradient(size, mode).save(path, format=fmt)
        return path
    return _make


@pytest.fixture
def gradient():
    return _gradient
