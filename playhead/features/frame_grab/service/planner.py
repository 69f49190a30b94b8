# File: playhead/features/frame_grab/service/planner.py
from typing import Iterable

from playhead.core.common.enums import SeekStrategy
from playhead.features.positioning.domain.models import SeekWindow
from ..domain.models import SeekPlan


def plan_seek(window: SeekWindow, keyframes: Iterable[float]) -> SeekPlan:
    """
    Picks the cheapest reachable time inside `window`.

    Landing on a keyframe needs no decoding past it, so any keyframe inside
    the window wins, the one closest to the target first (earlier on ties).
    Without one, or when the window is a single point, seek exactly.
    """
    target = window.target_seconds
    if window.is_exact:
        return SeekPlan(seek_seconds=target, strategy=SeekStrategy.EXACT)

    candidates = [k for k in keyframes if window.contains(k)]
    if not candidates:
        return SeekPlan(seek_seconds=target, strategy=SeekStrategy.EXACT)

    best = min(candidates, key=lambda k: (abs(k - target), k))
    return SeekPlan(seek_seconds=best, strategy=SeekStrategy.KEYFRAME)
