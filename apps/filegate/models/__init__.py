# Import all models so SQLAlchemy can discover them
from .file_metadata import FileMetadata

__all__ = ["FileMetadata"]
