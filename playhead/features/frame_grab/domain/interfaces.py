from abc import ABC, abstractmethod
from pathlib import Path
from typing import List
from .models import FrameGrabRequest, FrameGrabResult

class IMediaProbe(ABC):
    """
    Contract for media inspection (duration, keyframe layout).
    """

    @abstractmethod
    def get_duration(self, video_path: Path) -> float:
        """Returns the container duration in seconds."""
        pass

    @abstractmethod
    def list_keyframes(self, video_path: Path) -> List[float]:
        """Returns the sorted presentation times of video keyframes, in seconds."""
        pass

class IFrameGrabber(ABC):
    """
    Contract for extracting a still frame at a Position.
    Abstracts away the underlying tool (FFmpeg) from the seek logic.
    """

    @abstractmethod
    def grab_frame(self, request: FrameGrabRequest) -> FrameGrabResult:
        """
        Writes the frame at (or acceptably near) the requested position.

        Args:
            request: Source, output, position and optional bounding segment.

        Raises:
            FileNotFoundError: If source does not exist.
            RuntimeError: If the underlying process fails.
        """
        pass
