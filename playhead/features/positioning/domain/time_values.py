# File: playhead/features/positioning/domain/time_values.py
"""
Conversion of loosely typed time inputs into float seconds.

Accepted forms: int, float, Fraction, Decimal, timedelta and timecode strings.
Conversions never raise; normalize_time/normalize_tolerance map anything that
is not a usable time onto the timeline origin / zero tolerance.
"""
import math
import numbers
import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

TimeInput = Union[None, int, float, numbers.Real, Decimal, timedelta, str]

# [[HH:]MM:]SS[.fff] with "." or "," as decimal separator
_CLOCK_PATTERN = re.compile(r"^(?:(?:(\d+):)?(\d+):)?(\d+(?:[.,]\d+)?)$")


def parse_timecode(text: str) -> float:
    """
    Parses a timecode string into seconds.

    Supports clock forms (SS, MM:SS, HH:MM:SS, each with an optional
    fractional part) and plain float literals such as "12.5", "-3" or "inf".

    Raises:
        ValueError: If the text is not a recognizable timecode.
    """
    cleaned = text.strip()
    match = _CLOCK_PATTERN.match(cleaned)
    if match:
        hours, minutes, seconds = match.groups()
        seconds_value = float(seconds.replace(",", "."))
        if minutes is not None and seconds_value >= 60:
            raise ValueError(f"Seconds out of range in timecode: {text!r}")
        if hours is not None and int(minutes) >= 60:
            raise ValueError(f"Minutes out of range in timecode: {text!r}")
        return int(hours or 0) * 3600 + int(minutes or 0) * 60 + seconds_value

    try:
        return float(cleaned)
    except ValueError:
        raise ValueError(f"Unrecognized timecode: {text!r}") from None


def format_timecode(seconds: float) -> str:
    """
    Format seconds -> HH:MM:SS.mmm ("inf" for an unbounded value).
    """
    if math.isnan(seconds) or seconds < 0:
        raise ValueError(f"Cannot format as timecode: {seconds}")
    if math.isinf(seconds):
        return "inf"
    total_ms = int(round(seconds * 1000.0))
    ms = total_ms % 1000
    total_s = total_ms // 1000
    s = total_s % 60
    total_m = total_s // 60
    m = total_m % 60
    h = total_m // 60
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"


def to_seconds(value: TimeInput) -> Optional[float]:
    """
    Best-effort conversion to float seconds.
    Returns None when the value does not describe a time. NaN and infinities
    are passed through untouched.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, str):
        try:
            return parse_timecode(value)
        except ValueError:
            return None
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            return float(value)
        except (OverflowError, ValueError, InvalidOperation):
            return None
    return None


def normalize_time(value: TimeInput) -> float:
    """Invalid times (missing, NaN, -inf, unparseable) collapse to the origin."""
    seconds = to_seconds(value)
    if seconds is None or math.isnan(seconds) or seconds == -math.inf:
        return 0.0
    return seconds + 0.0


def normalize_tolerance(value: TimeInput) -> float:
    """Invalid tolerances (missing, NaN, negative, unparseable) become zero."""
    seconds = to_seconds(value)
    if seconds is None or math.isnan(seconds) or seconds < 0:
        return 0.0
    # + 0.0 folds -0.0 into 0.0
    return seconds + 0.0
