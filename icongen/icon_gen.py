# icongen/icon_gen.py
import os

from PIL import Image

from .artifacts import (
    LAUNCHER,
    LAUNCHER_ROUND,
    NOTIFICATION,
    EnhancedLogo,
    OutputArtifact,
    SizeBucket,
)
from .errors import DecodeError, SourceNotFound
from .image_io import ensure_dir, open_image, save_png

# =========================
# Density catalogs
# =========================
LAUNCHER_SIZES = (
    SizeBucket("mdpi", 48),
    SizeBucket("hdpi", 72),
    SizeBucket("xhdpi", 96),
    SizeBucket("xxhdpi", 144),
    SizeBucket("xxxhdpi", 192),
)

NOTIFICATION_SIZES = (
    SizeBucket("mdpi", 24),
    SizeBucket("hdpi", 36),
    SizeBucket("xhdpi", 48),
    SizeBucket("xxhdpi", 72),
    SizeBucket("xxxhdpi", 96),
)

LAUNCHER_DIR_PREFIX = "mipmap"
NOTIFICATION_DIR_PREFIX = "drawable"

LAUNCHER_FILE = "ic_launcher.png"
LAUNCHER_ROUND_FILE = "ic_launcher_round.png"
NOTIFICATION_FILE = "ic_notification.png"


def bucket_dir(res_dir, prefix: str, bucket: SizeBucket) -> str:
    return os.path.join(res_dir, f"{prefix}-{bucket.name}")


def resize_exact(img: Image.Image, size: int) -> Image.Image:
    # area-average; aspect ratio is not kept
    return img.resize((size, size), Image.Resampling.BOX)


def load_enhanced_logo(enhanced) -> Image.Image:
    path = enhanced.path if isinstance(enhanced, EnhancedLogo) else enhanced
    try:
        return open_image(path)
    except DecodeError as e:
        raise SourceNotFound(path, f"enhanced logo is not decodable ({e.reason})") from e


def generate_launcher_icons(img, res_dir, sizes=LAUNCHER_SIZES):
    artifacts = []
    for bucket in sizes:
        dst = ensure_dir(bucket_dir(res_dir, LAUNCHER_DIR_PREFIX, bucket))

        icon = resize_exact(img, bucket.size)
        out = save_png(icon, dst / LAUNCHER_FILE)
        artifacts.append(OutputArtifact(LAUNCHER, out, icon.size, bucket.name))

        # same resize as ic_launcher, no circular mask
        round_icon = resize_exact(img, bucket.size)
        round_out = save_png(round_icon, dst / LAUNCHER_ROUND_FILE)
        artifacts.append(OutputArtifact(LAUNCHER_ROUND, round_out, round_icon.size, bucket.name))

        print(f"[ICONS] {dst.name}: launcher icons {bucket.size}x{bucket.size}", flush=True)
    return artifacts


def generate_notification_icons(img, res_dir, sizes=NOTIFICATION_SIZES):
    artifacts = []
    for bucket in sizes:
        dst = ensure_dir(bucket_dir(res_dir, NOTIFICATION_DIR_PREFIX, bucket))

        icon = resize_exact(img, bucket.size)
        out = save_png(icon, dst / NOTIFICATION_FILE)
        artifacts.append(OutputArtifact(NOTIFICATION, out, icon.size, bucket.name))

        print(f"[ICONS] {dst.name}: notification icon {bucket.size}x{bucket.size}", flush=True)
    return artifacts


def generate_icons(enhanced, out_res_dir):
    """
    Stage 2: write the launcher and notification matrix from the enhanced logo.

    `enhanced` is an EnhancedLogo or a path to the enhanced logo file.
    The first failing bucket aborts the rest.
    """
    img = load_enhanced_logo(enhanced)
    ensure_dir(out_res_dir)

    artifacts = generate_launcher_icons(img, out_res_dir)
    artifacts += generate_notification_icons(img, out_res_dir)
    print(f"[ICONS] Generated {len(artifacts)} density icons under {out_res_dir}", flush=True)
    return artifacts
