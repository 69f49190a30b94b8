from datetime import timezone
from uuid import UUID
from typing import List, Optional
from playhead.core.database.connection import SessionLocal
from playhead.features.positioning.domain.models import Position
from .sql_models import BookmarkModel
from ..domain.interfaces import IBookmarkRepository
from ..domain.models import Bookmark

def _to_domain(row: BookmarkModel) -> Bookmark:
    # Rebuilt through the Position constructor so stored values are normalized too
    position = Position(row.time_seconds, row.tolerance_before_seconds, row.tolerance_after_seconds)
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Bookmark(
        id=row.id,
        media_path=row.media_path,
        position=position,
        created_at=created_at,
        label=row.label
    )

class SqlBookmarkRepo(IBookmarkRepository):
    def add(self, media_path: str, position: Position, label: Optional[str] = None) -> UUID:
        with SessionLocal() as db:
            try:
                row = BookmarkModel(
                    media_path=media_path,
                    label=label,
                    time_seconds=position.time,
                    tolerance_before_seconds=position.tolerance_before,
                    tolerance_after_seconds=position.tolerance_after
                )
                db.add(row)
                db.commit()
                db.refresh(row)
                return row.id
            except Exception:
                db.rollback()
                raise

    def get(self, bookmark_id: UUID) -> Optional[Bookmark]:
        with SessionLocal() as db:
            row = db.get(BookmarkModel, bookmark_id)
            return _to_domain(row) if row else None

    def list_for_media(self, media_path: str) -> List[Bookmark]:
        with SessionLocal() as db:
            rows = (
                db.query(BookmarkModel)
                .filter(BookmarkModel.media_path == media_path)
                .order_by(BookmarkModel.time_seconds, BookmarkModel.created_at)
                .all()
            )
            return [_to_domain(row) for row in rows]

    def latest_for_media(self, media_path: str) -> Optional[Bookmark]:
        with SessionLocal() as db:
            row = (
                db.query(BookmarkModel)
                .filter(BookmarkModel.media_path == media_path)
                .order_by(BookmarkModel.created_at.desc())
                .first()
            )
            return _to_domain(row) if row else None

    def delete(self, bookmark_id: UUID) -> bool:
        with SessionLocal() as db:
            try:
                row = db.get(BookmarkModel, bookmark_id)
                if row is None:
                    return False
                db.delete(row)
                db.commit()
                return True
            except Exception:
                db.rollback()
                raise
