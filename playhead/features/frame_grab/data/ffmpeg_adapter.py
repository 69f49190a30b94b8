import subprocess
import logging
from typing import Optional
from playhead.core.config.settings import settings
from playhead.core.common.enums import SeekStrategy
from playhead.features.positioning.service.window import resolve_window
from playhead.features.positioning.domain.time_values import format_timecode
from ..domain.interfaces import IFrameGrabber, IMediaProbe
from ..domain.models import FrameGrabRequest, FrameGrabResult
from ..service.planner import plan_seek
from .ffprobe_adapter import FFprobeAdapter

logger = logging.getLogger(__name__)

# Length of the tail read when grabbing the last frame
END_TAIL_SECONDS = 1.0

class FFmpegFrameGrabber(IFrameGrabber):
    """
    Concrete implementation of IFrameGrabber using FFmpeg.
    Resolves the request's Position into a window (bounded by the media
    duration and the optional segment), then seeks to a keyframe when the
    window allows it, or to the exact target otherwise.
    """

    def __init__(self, probe: Optional[IMediaProbe] = None):
        self.probe = probe or FFprobeAdapter()

    def grab_frame(self, request: FrameGrabRequest) -> FrameGrabResult:
        source_path = request.source_video.path

        # 1. Resolve the reachable window
        duration = self.probe.get_duration(source_path)
        window = resolve_window(request.position, segment=request.segment, duration=duration)

        # 2. Choose where to land (keyframes are only needed for a non-exact window)
        keyframes = [] if window.is_exact else self.probe.list_keyframes(source_path)
        plan = plan_seek(window, keyframes)
        logger.info(
            f"Seek plan for {source_path.name}: {plan.strategy.value} at "
            f"{format_timecode(plan.seek_seconds)} (window "
            f"{format_timecode(window.earliest_seconds)}-{format_timecode(window.latest_seconds)})"
        )

        # 3. Extract the frame
        request.output_image.ensure_parent_dir()
        # A leftover image from an earlier grab must not pass for this one
        request.output_image.path.unlink(missing_ok=True)

        # ffmpeg writes nothing when seeking to (or past) the end, so the
        # last frame is taken by reading the tail of the file instead.
        at_end = plan.seek_seconds >= duration
        reached_seconds = duration if at_end else plan.seek_seconds

        if at_end:
            # -sseof: seek relative to the end of the input
            # -update 1: keep overwriting the image, the last decoded frame stays
            seek_args = ["-sseof", f"-{END_TAIL_SECONDS:.3f}"]
            frame_args = ["-update", "1"]
        else:
            # -ss before -i: input seeking; ffmpeg decodes from the preceding
            # keyframe up to the timestamp, which is free when it IS a keyframe.
            # -frames:v 1: a single still
            seek_args = ["-ss", f"{plan.seek_seconds:.6f}"]
            frame_args = ["-frames:v", "1"]

        # -q:v: JPEG quality
        cmd = [
            settings.FFMPEG_BINARY,
            "-y",
            *seek_args,
            "-i", str(source_path),
            *frame_args,
            "-q:v", str(settings.FRAME_JPEG_QUALITY),
            str(request.output_image.path)
        ]

        logger.info(f"Executing FFmpeg Frame Grab: {' '.join(cmd)}")

        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True
            )
        except subprocess.CalledProcessError as e:
            error_message = e.stderr if e.stderr else "Unknown FFmpeg error"
            logger.error(f"FFmpeg Frame Grab Failed. STDERR: {error_message}")
            raise RuntimeError(f"Frame extraction failed: {error_message}") from e

        if not request.output_image.path.exists():
            raise RuntimeError(f"No frame produced at {plan.seek_seconds}s for {source_path}")

        return FrameGrabResult(
            output_path=request.output_image.path,
            requested_seconds=request.position.time,
            reached_seconds=reached_seconds,
            strategy=plan.strategy
        )
