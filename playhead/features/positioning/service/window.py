# File: playhead/features/positioning/service/window.py
import math
from typing import Optional

from ..domain.models import Position, Segment, SeekWindow


def _lower_edge(time: float, tolerance: float) -> float:
    # An unbounded tolerance reaches the origin even from time == +inf.
    if math.isinf(tolerance):
        return -math.inf
    return time - tolerance


def _clamp(seconds: float, floor: float, ceiling: float) -> float:
    return min(max(seconds, floor), ceiling)


def resolve_window(
    position: Position,
    segment: Optional[Segment] = None,
    duration: Optional[float] = None,
) -> SeekWindow:
    """
    Turns a Position into the window a seek is allowed to land in.

    1. The target is clamped to [0, duration], then to `segment` when
       given, so the result never leaves the segment whatever the
       tolerances allow.
    2. Candidate window [target - tolerance_before, target + tolerance_after],
       intersected with the same bounds.

    Args:
        position: The requested position.
        segment: Optional sub-range the seek must stay within.
        duration: Optional media duration in seconds.

    Raises:
        ValueError: If duration is NaN or negative, or the segment starts
            past the end of the media.
    """
    floor = 0.0
    ceiling = math.inf

    if duration is not None:
        if math.isnan(duration) or duration < 0:
            raise ValueError(f"Invalid media duration: {duration}")
        ceiling = duration

    if segment is not None:
        if segment.start_seconds > ceiling:
            raise ValueError(
                f"Segment {segment.start_seconds}-{segment.end_seconds}s starts after media end ({ceiling}s)"
            )
        floor = segment.start_seconds
        ceiling = min(ceiling, segment.end_seconds)

    # Tolerances apply around the clamped target.
    target = _clamp(position.time, floor, ceiling)
    earliest = _lower_edge(target, position.tolerance_before)
    latest = target + position.tolerance_after

    return SeekWindow(
        target_seconds=target,
        earliest_seconds=_clamp(earliest, floor, ceiling),
        latest_seconds=_clamp(latest, floor, ceiling),
    )
