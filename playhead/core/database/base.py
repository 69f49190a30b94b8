# File: playhead/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Feature models (bookmarks, ...) inherit from this.
Base = declarative_base()
