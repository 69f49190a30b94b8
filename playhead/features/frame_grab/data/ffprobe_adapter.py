import subprocess
import logging
from pathlib import Path
from typing import List
from playhead.core.config.settings import settings
from ..domain.interfaces import IMediaProbe

logger = logging.getLogger(__name__)

class FFprobeAdapter(IMediaProbe):
    """
    Concrete implementation of IMediaProbe using ffprobe.
    Keyframes are read from packet flags, so no frame is decoded.
    """

    def _run(self, cmd: List[str]) -> str:
        logger.debug(f"Executing FFprobe: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True
            )
        except subprocess.CalledProcessError as e:
            error_message = e.stderr if e.stderr else "Unknown FFprobe error"
            logger.error(f"FFprobe Failed. STDERR: {error_message}")
            raise RuntimeError(f"Media probe failed: {error_message}") from e
        return result.stdout

    def get_duration(self, video_path: Path) -> float:
        if not video_path.exists():
            raise FileNotFoundError(f"Video not found: {video_path}")

        cmd = [
            settings.FFPROBE_BINARY,
            "-v", "error",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            str(video_path)
        ]
        output = self._run(cmd).strip()

        try:
            return float(output)
        except ValueError:
            raise RuntimeError(f"Unreadable duration for {video_path}: {output!r}") from None

    def list_keyframes(self, video_path: Path) -> List[float]:
        if not video_path.exists():
            raise FileNotFoundError(f"Video not found: {video_path}")

        # One "pts_time,flags" line per packet of the first video stream.
        # Keyframe packets carry "K" in their flags (e.g. "K__").
        cmd = [
            settings.FFPROBE_BINARY,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "packet=pts_time,flags",
            "-of", "csv=p=0",
            str(video_path)
        ]
        output = self._run(cmd)

        keyframes = []
        for line in output.splitlines():
            fields = line.strip().split(",")
            if len(fields) < 2 or "K" not in fields[1]:
                continue
            try:
                keyframes.append(float(fields[0]))
            except ValueError:
                # pts_time is "N/A" for packets without a timestamp
                continue

        keyframes.sort()
        logger.debug(f"Found {len(keyframes)} keyframes in {video_path.name}")
        return keyframes
