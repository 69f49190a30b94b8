from abc import ABC, abstractmethod
from uuid import UUID
from typing import List, Optional
from playhead.features.positioning.domain.models import Position
from .models import Bookmark

class IBookmarkRepository(ABC):
    @abstractmethod
    def add(self, media_path: str, position: Position, label: Optional[str] = None) -> UUID:
        """Persists a position for a media file. Returns the new Bookmark ID."""
        pass

    @abstractmethod
    def get(self, bookmark_id: UUID) -> Optional[Bookmark]:
        pass

    @abstractmethod
    def list_for_media(self, media_path: str) -> List[Bookmark]:
        """All bookmarks of a media file, in timeline order."""
        pass

    @abstractmethod
    def latest_for_media(self, media_path: str) -> Optional[Bookmark]:
        """The most recently created bookmark of a media file, if any."""
        pass

    @abstractmethod
    def delete(self, bookmark_id: UUID) -> bool:
        """Returns False when nothing was deleted."""
        pass
