from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from playhead.core.common.enums import SeekStrategy
from playhead.features.positioning.domain.models import Position, Segment

@dataclass(frozen=True)
class MediaFile:
    """
    Value Object representing a media file path.
    """
    path: Path
    validate_exists: bool = True

    def __post_init__(self):
        if self.validate_exists:
            if not self.path.exists():
                raise FileNotFoundError(f"Media file not found: {self.path}")
            if not self.path.is_file():
                raise ValueError(f"Path is not a file: {self.path}")

    def ensure_parent_dir(self):
        """Ensures the directory for this file exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

@dataclass(frozen=True)
class SeekPlan:
    """
    The concrete time an engine will seek to, and how it gets there.
    """
    seek_seconds: float
    strategy: SeekStrategy

@dataclass(frozen=True)
class FrameGrabRequest:
    source_video: MediaFile
    output_image: MediaFile
    position: Position
    segment: Optional[Segment] = None

@dataclass(frozen=True)
class FrameGrabResult:
    output_path: Path
    requested_seconds: float
    reached_seconds: float
    strategy: SeekStrategy
