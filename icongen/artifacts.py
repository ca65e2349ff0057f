# icongen/artifacts.py
from pathlib import Path
from typing import NamedTuple

ENHANCED = "enhanced"
APP_ICON = "app_icon"
LAUNCHER = "launcher"
LAUNCHER_ROUND = "launcher_round"
NOTIFICATION = "notification"


class SizeBucket(NamedTuple):
    name: str
    size: int


class OutputArtifact(NamedTuple):
    kind: str
    path: Path
    size: tuple[int, int]
    bucket: str | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "path": str(self.path),
            "width": self.size[0],
            "height": self.size[1],
            "bucket": self.bucket,
        }


class EnhancedLogo(NamedTuple):
    """Reference to the persisted enhanced logo handed from stage 1 to stage 2."""

    path: Path
    size: tuple[int, int]
