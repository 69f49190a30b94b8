import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, DateTime, Uuid, Index
from playhead.core.database.base import Base

def utc_now():
    return datetime.now(timezone.utc)

class BookmarkModel(Base):
    """
    A saved position inside a media file (resume point or user mark).

    Tolerances are stored as plain floats; an infinite tolerance is stored
    as the float infinity both Postgres and SQLite support.
    """
    __tablename__ = "bookmarks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    media_path = Column(String, nullable=False)
    label = Column(String, nullable=True)

    time_seconds = Column(Float, nullable=False)
    tolerance_before_seconds = Column(Float, nullable=False, default=0.0)
    tolerance_after_seconds = Column(Float, nullable=False, default=0.0)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    __table_args__ = (
        Index("ix_bookmarks_media_path", "media_path"),
    )
