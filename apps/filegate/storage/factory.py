import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from apps.filegate.config import FilegateSettings, get_filegate_settings
from apps.filegate.storage.local import LocalStorage
from apps.filegate.storage.metadata import MetadataIndex

logger = logging.getLogger(__name__)


class ResourceFactory:
    """Builds the default storage from settings."""

    def __init__(self, settings: Optional[FilegateSettings] = None, metadata_index: Optional[MetadataIndex] = None):
        self.settings = settings or get_filegate_settings()
        self._metadata_index = metadata_index

    @property
    def metadata_index(self) -> MetadataIndex:
        if self._metadata_index is None:
            from apps.filegate.db import AsyncSessionLocal

            self._metadata_index = MetadataIndex(AsyncSessionLocal)
        return self._metadata_index

    def get_default_storage(self) -> Optional[LocalStorage]:
        """
        Get the default storage.
        Returns None if no storage root is configured or it is not a directory.
        """
        root = self.settings.STORAGE_ROOT
        if not root:
            return None

        root_path = Path(root)
        if not root_path.is_dir():
            logger.debug(f"Storage root {root_path} is not a directory")
            return None

        return LocalStorage(
            root_path,
            metadata_index=self.metadata_index,
            processing_folder=self.settings.PROCESSING_FOLDER,
        )


@lru_cache()
def get_resource_factory() -> ResourceFactory:
    """Get cached resource factory instance."""
    return ResourceFactory()
