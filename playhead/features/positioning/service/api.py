# File: playhead/features/positioning/service/api.py
"""
Public Service API for building positions and resolving them for a seek.
"""
from typing import Optional

from ..domain.models import Position, Segment, SeekWindow
from ..domain.time_values import TimeInput
from .window import resolve_window


def position_default() -> Position:
    """The default position: the origin, reached precisely."""
    return Position.default()


def position_exact(time: TimeInput) -> Position:
    """Exact position at the specified time."""
    return Position.exact(time)


def position_near(time: TimeInput) -> Position:
    """Position around the specified time with maximum tolerance."""
    return Position.near(time)


def position_before(time: TimeInput) -> Position:
    """Position earlier than the specified time."""
    return Position.before(time)


def position_after(time: TimeInput) -> Position:
    """Position later than the specified time."""
    return Position.after(time)


def position_custom(time: TimeInput, tolerance_before: TimeInput, tolerance_after: TimeInput) -> Position:
    """
    Position for the specified time with custom tolerance settings.

    Args:
        time: The position time. Use 0 for the default position.
        tolerance_before: Tolerance allowed before `time`. Use 0 for precise
            positioning or math.inf for efficient positioning.
        tolerance_after: Tolerance allowed after `time`, same conventions.
    """
    return Position(time, tolerance_before, tolerance_after)


def reachable_window(
    position: Position,
    segment: Optional[Segment] = None,
    duration: Optional[float] = None,
) -> SeekWindow:
    """
    Window a seek to `position` may land in, kept inside `segment` and
    [0, duration] when those are given.
    """
    return resolve_window(position, segment=segment, duration=duration)
