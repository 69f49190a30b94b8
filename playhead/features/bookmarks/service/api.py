import logging
from uuid import UUID
from typing import List, Optional
from playhead.features.positioning.domain.models import Position
from playhead.features.positioning.domain.time_values import format_timecode
from ..domain.interfaces import IBookmarkRepository
from ..domain.models import Bookmark
from ..data.repository import SqlBookmarkRepo

logger = logging.getLogger(__name__)

class BookmarkService:
    """
    Facade for the Bookmarks Feature.
    Saves positions per media file and answers "where do I resume?".
    """
    def __init__(self, repo: Optional[IBookmarkRepository] = None):
        self.repo = repo or SqlBookmarkRepo()

    def save(self, media_path: str, position: Position, label: Optional[str] = None) -> UUID:
        bookmark_id = self.repo.add(media_path, position, label)
        logger.info(
            f"Bookmark {bookmark_id} saved for {media_path} at {format_timecode(max(position.time, 0.0))} "
            f"({position.kind.value})"
        )
        return bookmark_id

    def get(self, bookmark_id: UUID) -> Optional[Bookmark]:
        return self.repo.get(bookmark_id)

    def list_for_media(self, media_path: str) -> List[Bookmark]:
        return self.repo.list_for_media(media_path)

    def delete(self, bookmark_id: UUID) -> bool:
        deleted = self.repo.delete(bookmark_id)
        if not deleted:
            logger.warning(f"Bookmark {bookmark_id} not found, nothing deleted")
        return deleted

    def resume_position(self, media_path: str) -> Position:
        """
        Position of the most recent bookmark for the media,
        or the default position when there is none.
        """
        latest = self.repo.latest_for_media(media_path)
        if latest is None:
            logger.debug(f"No bookmark for {media_path}, resuming at default position")
            return Position.default()
        return latest.position

# Singleton Instance for easy import
bookmarks = BookmarkService()
