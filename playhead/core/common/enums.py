# File: playhead/core/common/enums.py

from enum import Enum, unique

@unique
class PositionKind(str, Enum):
    EXACT = "exact"
    NEAR = "near"
    BEFORE = "before"
    AFTER = "after"
    CUSTOM = "custom"

@unique
class SeekStrategy(str, Enum):
    EXACT = "exact"        # decode up to the requested frame
    KEYFRAME = "keyframe"  # land on a keyframe inside the window
