# File: playhead/features/positioning/domain/models.py
import math
from dataclasses import dataclass

from playhead.core.common.enums import PositionKind
from .time_values import TimeInput, normalize_time, normalize_tolerance

INFINITE_TOLERANCE = math.inf


@dataclass(frozen=True)
class Position:
    """
    Value Object representing a time to reach within a given tolerance.

    A small tolerance means greater precision at the expense of efficiency
    (reaching a position precisely may require more decoding or buffering).
    A large tolerance trades precision for efficiency.

    Construction never fails: invalid times are set to 0.0 (the origin) and
    invalid tolerances to 0.0 (precise positioning). After construction,
    `time` is never NaN or -inf and both tolerances are >= 0 or math.inf.

    Positions are boundary-agnostic: keeping a seek inside a segment is the
    job of whoever consumes the position (see resolve_window).
    """
    # Any TimeInput is accepted; __post_init__ stores the normalized float.
    time: float = 0.0
    tolerance_before: float = 0.0
    tolerance_after: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "time", normalize_time(self.time))
        object.__setattr__(self, "tolerance_before", normalize_tolerance(self.tolerance_before))
        object.__setattr__(self, "tolerance_after", normalize_tolerance(self.tolerance_after))

    @classmethod
    def default(cls) -> "Position":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def exact(cls, time: TimeInput) -> "Position":
        return cls(time, 0.0, 0.0)

    @classmethod
    def near(cls, time: TimeInput) -> "Position":
        return cls(time, INFINITE_TOLERANCE, INFINITE_TOLERANCE)

    @classmethod
    def before(cls, time: TimeInput) -> "Position":
        return cls(time, INFINITE_TOLERANCE, 0.0)

    @classmethod
    def after(cls, time: TimeInput) -> "Position":
        return cls(time, 0.0, INFINITE_TOLERANCE)

    @property
    def kind(self) -> PositionKind:
        before_open = math.isinf(self.tolerance_before)
        after_open = math.isinf(self.tolerance_after)
        if self.tolerance_before == 0 and self.tolerance_after == 0:
            return PositionKind.EXACT
        if before_open and after_open:
            return PositionKind.NEAR
        if before_open and self.tolerance_after == 0:
            return PositionKind.BEFORE
        if after_open and self.tolerance_before == 0:
            return PositionKind.AFTER
        return PositionKind.CUSTOM


@dataclass(frozen=True)
class Segment:
    """
    Value Object for a bounded sub-range of the timeline.
    Enforces 0 <= start_seconds < end_seconds, both finite.
    """
    start_seconds: float
    end_seconds: float

    def __post_init__(self):
        if not (math.isfinite(self.start_seconds) and math.isfinite(self.end_seconds)):
            raise ValueError(f"Segment bounds must be finite: {self.start_seconds}-{self.end_seconds}")
        if self.start_seconds < 0:
            raise ValueError(f"Segment start cannot be negative: {self.start_seconds}")
        if self.end_seconds <= self.start_seconds:
            raise ValueError(f"Segment end ({self.end_seconds}) must be greater than start ({self.start_seconds})")

    @property
    def duration(self) -> float:
        return self.end_seconds - self.start_seconds

    def contains(self, seconds: float) -> bool:
        return self.start_seconds <= seconds <= self.end_seconds


@dataclass(frozen=True)
class SeekWindow:
    """
    The reachable interval for a seek once a Position has been resolved
    against the timeline (and optionally a segment).
    earliest_seconds <= target_seconds <= latest_seconds always holds.
    """
    target_seconds: float
    earliest_seconds: float
    latest_seconds: float

    def __post_init__(self):
        if not (self.earliest_seconds <= self.target_seconds <= self.latest_seconds):
            raise ValueError(
                f"Target {self.target_seconds} outside window "
                f"[{self.earliest_seconds}, {self.latest_seconds}]"
            )

    @property
    def is_exact(self) -> bool:
        return self.earliest_seconds == self.latest_seconds

    @property
    def width(self) -> float:
        return self.latest_seconds - self.earliest_seconds

    def contains(self, seconds: float) -> bool:
        return self.earliest_seconds <= seconds <= self.latest_seconds
