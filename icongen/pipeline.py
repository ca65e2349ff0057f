# icongen/pipeline.py
"""Build the master logo assets and the Android icon matrix from one source logo.

Stage 1 writes enhanced_logo.png and app_icon.png into the logo directory.
Stage 2 reads enhanced_logo.png back and writes mipmap-*/ic_launcher*.png and
drawable-*/ic_notification.png under the resource root.
"""
import argparse
import os
import sys
from pathlib import Path
from typing import NamedTuple

from .enhance_logo import build_master_assets
from .errors import IconPipelineError
from .icon_gen import generate_icons

# =========================
# Configuration
# =========================
DEFAULT_LOGO_DIR = "design/logo"
DEFAULT_RES_ROOT = "android/app/src/main/res"

SOURCE_NAME = "original_logo.jpg"
ENHANCED_NAME = "enhanced_logo.png"
APP_ICON_NAME = "app_icon.png"


class PipelineConfig(NamedTuple):
    source_path: Path
    enhanced_logo_path: Path
    app_icon_path: Path
    res_root: Path


def make_config(logo_dir, res_root, source_path=None) -> PipelineConfig:
    logo_dir = Path(logo_dir)
    return PipelineConfig(
        source_path=Path(source_path) if source_path else logo_dir / SOURCE_NAME,
        enhanced_logo_path=logo_dir / ENHANCED_NAME,
        app_icon_path=logo_dir / APP_ICON_NAME,
        res_root=Path(res_root),
    )


def load_config(environ=None) -> PipelineConfig:
    env = os.environ if environ is None else environ
    return make_config(
        logo_dir=env.get("ICON_LOGO_DIR", DEFAULT_LOGO_DIR),
        res_root=env.get("ICON_RES_ROOT", DEFAULT_RES_ROOT),
        source_path=env.get("ICON_SOURCE"),
    )


# =========================
# Runner
# =========================
def run_pipeline(config: PipelineConfig):
    """
    Run both stages in order. Any error aborts the run and leaves
    already written files in place.
    """
    enhanced, artifacts = build_master_assets(
        config.source_path,
        config.enhanced_logo_path,
        config.app_icon_path,
    )
    artifacts += generate_icons(enhanced, config.res_root)
    return artifacts


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--source", type=Path, help="source logo (default: $ICON_SOURCE or <logo-dir>/original_logo.jpg)")
    parser.add_argument("--logo-dir", type=Path, help="directory for enhanced_logo.png and app_icon.png (default: $ICON_LOGO_DIR)")
    parser.add_argument("--res-root", type=Path, help="Android res directory (default: $ICON_RES_ROOT)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    env = dict(os.environ)
    for name, value in (("ICON_SOURCE", args.source), ("ICON_LOGO_DIR", args.logo_dir), ("ICON_RES_ROOT", args.res_root)):
        if value is not None:
            env[name] = str(value)
    config = load_config(env)

    try:
        artifacts = run_pipeline(config)
    except IconPipelineError as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr, flush=True)
        return 1

    print(f"[ICONS] Done, {len(artifacts)} files written.", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
