from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID
from playhead.features.positioning.domain.models import Position

@dataclass(frozen=True)
class Bookmark:
    """
    A Position saved against a media file.
    """
    id: UUID
    media_path: str
    position: Position
    created_at: datetime
    label: Optional[str] = None
