# icongen/image_io.py
import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import SourceNotFound, DecodeError, WriteFailure

TRANSPARENT = (0, 0, 0, 0)


def open_image(path) -> Image.Image:
    """
    Decode an image fully and detach it from its file handle.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFound(path, "no such file")

    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except PermissionError as e:
        raise SourceNotFound(path, "not readable") from e
    except UnidentifiedImageError as e:
        raise DecodeError(path, "unsupported image format") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(path, str(e)) from e
    except (OSError, SyntaxError) as e:
        # truncated or corrupt data
        raise DecodeError(path, str(e)) from e


def new_canvas(size) -> Image.Image:
    return Image.new("RGBA", size, TRANSPARENT)


def ensure_dir(path) -> Path:
    path = Path(path)
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise WriteFailure(path, str(e)) from e
    return path


def save_png(img: Image.Image, path) -> Path:
    path = Path(path)
    try:
        img.save(path, format="PNG")
    except OSError as e:
        raise WriteFailure(path, str(e)) from e
    return path
