# File: playhead/core/config/settings.py

import os
import shutil
from pathlib import Path


class Settings:
    # --- Paths ---
    # playhead/core/config/settings.py -> playhead/core/config -> playhead/core -> playhead -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = Path(os.getenv("PLAYHEAD_DATA_DIR", str(BASE_DIR / "data")))
    FRAMES_DIR: Path = DATA_DIR / "frames"

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "playhead_db")

    @property
    def USE_SQLITE(self) -> bool:
        return os.getenv("USE_SQLITE", "false").lower() == "true"

    @property
    def SQLITE_PATH(self) -> str:
        return os.getenv("SQLITE_PATH", "./playhead.db")

    @property
    def DATABASE_URL(self) -> str:
        # SQLite only when explicitly requested, Postgres otherwise.
        if self.USE_SQLITE:
            return f"sqlite:///{self.SQLITE_PATH}"

        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # --- External Tools ---
    # Auto-detect ffmpeg/ffprobe or use env vars
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")
    FFPROBE_BINARY: str = os.getenv("FFPROBE_BINARY_PATH", shutil.which("ffprobe") or "ffprobe")

    # JPEG quality passed to ffmpeg -q:v (2 = best, 31 = worst)
    FRAME_JPEG_QUALITY: int = int(os.getenv("FRAME_JPEG_QUALITY", "2"))

    def ensure_dirs(self):
        """Creates necessary data directories if they don't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        self.FRAMES_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
