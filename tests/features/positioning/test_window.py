import math
import pytest

from playhead.features.positioning.domain.models import Segment, SeekWindow
from playhead.features.positioning.service.api import (
    position_exact,
    position_near,
    position_before,
    position_after,
    position_custom,
    reachable_window,
)

INF = math.inf

def _edges(window):
    return window.earliest_seconds, window.target_seconds, window.latest_seconds

# --- UNBOUNDED ---

def test_window_saturates_at_origin():
    assert _edges(reachable_window(position_custom(1, 5, 0))) == (0.0, 1.0, 1.0)
    assert _edges(reachable_window(position_before(10))) == (0.0, 10.0, 10.0)

def test_near_without_bounds_is_open_ended():
    window = reachable_window(position_near(50))
    assert _edges(window) == (0.0, 50.0, INF)
    assert not window.is_exact

def test_exact_window_is_a_point():
    window = reachable_window(position_exact(8))
    assert window.is_exact
    assert window.width == 0.0

def test_negative_time_is_clamped_to_origin():
    assert _edges(reachable_window(position_exact(-4))) == (0.0, 0.0, 0.0)

def test_infinite_time_with_infinite_before_reaches_origin():
    window = reachable_window(position_before(INF))
    assert window.earliest_seconds == 0.0
    assert window.target_seconds == INF

# --- SEGMENT CLAMPING ---

def test_near_is_clamped_to_segment():
    window = reachable_window(position_near(50), segment=Segment(40, 60))
    assert _edges(window) == (40.0, 50.0, 60.0)

def test_partial_overlap_is_intersected():
    window = reachable_window(position_custom(42, 5, 5), segment=Segment(40, 60))
    assert _edges(window) == (40.0, 42.0, 47.0)

def test_target_before_segment_is_pulled_inside():
    window = reachable_window(position_after(10), segment=Segment(40, 60))
    assert _edges(window) == (40.0, 40.0, 60.0)

def test_target_after_segment_is_pulled_inside():
    window = reachable_window(position_exact(90), segment=Segment(40, 60))
    assert _edges(window) == (60.0, 60.0, 60.0)

# --- DURATION ---

def test_duration_caps_upper_edge():
    window = reachable_window(position_after(8), duration=10.0)
    assert _edges(window) == (8.0, 8.0, 10.0)

def test_duration_and_segment_combine():
    window = reachable_window(position_near(5), segment=Segment(2, 30), duration=12.0)
    assert _edges(window) == (2.0, 5.0, 12.0)

@pytest.mark.parametrize("duration", [-1.0, math.nan])
def test_invalid_duration_is_rejected(duration):
    with pytest.raises(ValueError):
        reachable_window(position_exact(1), duration=duration)

def test_segment_past_media_end_is_rejected():
    with pytest.raises(ValueError):
        reachable_window(position_exact(1), segment=Segment(20, 30), duration=10.0)

# --- VALUE OBJECTS ---

@pytest.mark.parametrize("start, end", [(-1, 5), (5, 5), (6, 5), (0, INF), (math.nan, 3)])
def test_invalid_segment_is_rejected(start, end):
    with pytest.raises(ValueError):
        Segment(start, end)

def test_segment_helpers():
    segment = Segment(40, 60)
    assert segment.duration == 20
    assert segment.contains(40) and segment.contains(60)
    assert not segment.contains(61)

def test_seek_window_rejects_target_outside():
    with pytest.raises(ValueError):
        SeekWindow(target_seconds=5, earliest_seconds=6, latest_seconds=7)

# --- END OF CONTENT ---

def test_end_of_content_resolves_to_duration():
    window = reachable_window(position_exact(INF), duration=20.0)
    assert _edges(window) == (20.0, 20.0, 20.0)

def test_end_of_content_keeps_before_tolerance():
    window = reachable_window(position_custom(INF, 5, 0), duration=20.0)
    assert _edges(window) == (15.0, 20.0, 20.0)

def test_tolerances_apply_around_clamped_target():
    window = reachable_window(position_custom(90, 5, 0), segment=Segment(40, 60))
    assert _edges(window) == (55.0, 60.0, 60.0)
