import pytest

from playhead.core.common.enums import SeekStrategy
from playhead.features.positioning.domain.models import SeekWindow
from playhead.features.frame_grab.service.planner import plan_seek

KEYFRAMES = [0.0, 2.0, 4.0, 6.0, 8.0]

def test_exact_window_ignores_keyframes():
    plan = plan_seek(SeekWindow(4.0, 4.0, 4.0), KEYFRAMES)
    assert plan.seek_seconds == 4.0
    assert plan.strategy == SeekStrategy.EXACT

def test_nearest_keyframe_inside_window_wins():
    plan = plan_seek(SeekWindow(5.2, 0.0, 10.0), KEYFRAMES)
    assert plan.seek_seconds == 6.0
    assert plan.strategy == SeekStrategy.KEYFRAME

def test_tie_prefers_earlier_keyframe():
    plan = plan_seek(SeekWindow(5.0, 0.0, 10.0), KEYFRAMES)
    assert plan.seek_seconds == 4.0

def test_keyframes_outside_window_are_ignored():
    # "after" style window: only later keyframes qualify
    plan = plan_seek(SeekWindow(4.5, 4.5, 10.0), KEYFRAMES)
    assert plan.seek_seconds == 6.0
    assert plan.strategy == SeekStrategy.KEYFRAME

def test_falls_back_to_exact_without_keyframe_in_window():
    plan = plan_seek(SeekWindow(4.5, 4.2, 4.8), KEYFRAMES)
    assert plan.seek_seconds == 4.5
    assert plan.strategy == SeekStrategy.EXACT

@pytest.mark.parametrize("window", [
    SeekWindow(3.0, 0.0, 3.5),
    SeekWindow(7.9, 7.0, 100.0),
    SeekWindow(1.0, 1.0, 1.5),
])
def test_plan_never_leaves_window(window):
    plan = plan_seek(window, KEYFRAMES)
    assert window.contains(plan.seek_seconds)
