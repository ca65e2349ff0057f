# icongen/enhance_logo.py
from pathlib import Path

from PIL import Image

from .artifacts import APP_ICON, ENHANCED, EnhancedLogo, OutputArtifact
from .image_io import ensure_dir, new_canvas, open_image, save_png

APP_ICON_SIZE = 512
LOGO_SCALE = 0.8


def make_enhanced_logo(src: Image.Image) -> Image.Image:
    """Same pixels as the source on a transparent RGBA canvas of the same size."""
    canvas = new_canvas(src.size)
    canvas.paste(src, (0, 0))
    return canvas


def make_app_icon(src: Image.Image, icon_size: int = APP_ICON_SIZE) -> Image.Image:
    """
    Square icon with the logo stretched to 80% of the canvas on both axes
    and centered. Non-square logos are distorted, not letterboxed.
    """
    canvas = new_canvas((icon_size, icon_size))

    logo_side = int(icon_size * LOGO_SCALE)
    logo = src.resize((logo_side, logo_side), Image.Resampling.BICUBIC)

    x_offset = (icon_size - logo.width) // 2
    y_offset = (icon_size - logo.height) // 2
    canvas.paste(logo, (x_offset, y_offset))
    return canvas


def build_master_assets(source_path, enhanced_logo_path, app_icon_path):
    """
    Stage 1: write enhanced_logo.png and app_icon.png.

    Returns (EnhancedLogo, [artifacts]). Nothing is created on disk
    unless the source decodes.
    """
    src = open_image(source_path)
    print(f"[ICONS] Loaded source {source_path} ({src.width}x{src.height}, {src.mode})", flush=True)

    enhanced_logo_path = Path(enhanced_logo_path)
    app_icon_path = Path(app_icon_path)

    ensure_dir(enhanced_logo_path.parent)
    enhanced = make_enhanced_logo(src)
    save_png(enhanced, enhanced_logo_path)
    print(f"[ICONS] Wrote {enhanced_logo_path} ({enhanced.width}x{enhanced.height})", flush=True)

    ensure_dir(app_icon_path.parent)
    icon = make_app_icon(src)
    save_png(icon, app_icon_path)
    print(f"[ICONS] Wrote {app_icon_path} ({icon.width}x{icon.height})", flush=True)

    artifacts = [
        OutputArtifact(ENHANCED, enhanced_logo_path, enhanced.size),
        OutputArtifact(APP_ICON, app_icon_path, icon.size),
    ]
    return EnhancedLogo(enhanced_logo_path, enhanced.size), artifacts
