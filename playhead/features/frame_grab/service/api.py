import math
from pathlib import Path
from typing import Optional
from playhead.core.config.settings import settings
from playhead.features.positioning.domain.models import Position, Segment
from ..domain.models import FrameGrabRequest, FrameGrabResult, MediaFile
from ..data.ffmpeg_adapter import FFmpegFrameGrabber

def _default_frame_path(source: MediaFile, position: Position) -> Path:
    # e.g. episode_01_12500.jpg for a grab at 12.5s
    if math.isinf(position.time):
        suffix = "end"
    else:
        suffix = str(int(round(max(position.time, 0.0) * 1000)))
    return settings.FRAMES_DIR / f"{source.path.stem}_{suffix}.jpg"

def grab_frame(
    source_path: str,
    position: Position,
    dest_path: Optional[str] = None,
    segment: Optional[Segment] = None,
) -> FrameGrabResult:
    """
    Public Service API: Extract a still frame from a video at a position.

    Args:
        source_path: Path to the source video.
        position: Where to grab, with the acceptable tolerances.
        dest_path: Path where the image should be saved. Defaults to
            FRAMES_DIR/<video name>_<milliseconds>.jpg.
        segment: Optional sub-range the grabbed frame must come from.
    """
    # 1. Map Primitives to Domain Objects
    source = MediaFile(Path(source_path), validate_exists=True)

    if dest_path is None:
        settings.ensure_dirs()
        dest_path = str(_default_frame_path(source, position))

    # Output does not exist yet, so we disable validation
    output = MediaFile(Path(dest_path), validate_exists=False)

    request = FrameGrabRequest(
        source_video=source,
        output_image=output,
        position=position,
        segment=segment
    )

    # 2. Execute
    grabber = FFmpegFrameGrabber()
    return grabber.grab_frame(request)
