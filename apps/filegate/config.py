from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional

class FilegateSettings(BaseSettings):
    # Directory below the web root whose files are checked before serving
    PROTECTED_PREFIX: str = "uploads/"

    # Storage settings
    STORAGE_ROOT: Optional[str] = None
    PROCESSING_FOLDER: str = "_processed_"
    STREAM_CHUNK_SIZE: int = 64 * 1024

    # Metadata index
    DATABASE_URL: str = "sqlite+aiosqlite:///./filegate.db"

    # CORS settings
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["GET", "HEAD", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = [
        "Authorization",
        "Accept",
        "Origin",
        "Cache-Control",
        "Range",
    ]

    class Config:
        env_prefix = "FILEGATE_"
        env_file = ".env"
        extra = "ignore"  # Ignore extra fields from .env

    @property
    def protected_path(self) -> str:
        """Protected prefix as an anchored URL path, e.g. ``/uploads/``."""
        return normalize_prefix(self.PROTECTED_PREFIX)


def normalize_prefix(prefix: str) -> str:
    segment = prefix.strip().strip("/")
    if not segment:
        raise ValueError("Protected prefix must not be empty")
    return f"/{segment}/"


@lru_cache()
def get_filegate_settings():
    return FilegateSettings()
