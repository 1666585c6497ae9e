"""Storage backed by a directory on the local filesystem."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import List, Optional, Union

import aiofiles.os

from apps.filegate.exceptions import InvalidIdentifierError
from apps.filegate.storage.base import FileRecord, ResourceStorage
from apps.filegate.storage.metadata import MetadataIndex

DEFAULT_MIME_TYPE = "application/octet-stream"


class LocalStorage(ResourceStorage):
    """Files below ``root``, with access metadata from a ``MetadataIndex``.

    Identifiers are storage-relative paths such as ``/documents/report.pdf``.
    """

    def __init__(
        self,
        root: Union[str, Path],
        metadata_index: Optional[MetadataIndex] = None,
        processing_folder: str = "_processed_",
    ):
        self.root = Path(root)
        self.metadata_index = metadata_index
        self.processing_folder = "/" + processing_folder.strip("/")

    def _split_identifier(self, identifier: str) -> List[str]:
        if not identifier.startswith("/"):
            raise InvalidIdentifierError(identifier, "must start with '/'")
        if "\x00" in identifier or "\\" in identifier:
            raise InvalidIdentifierError(identifier, "contains a forbidden character")
        segments = identifier[1:].split("/")
        if any(segment in ("", ".", "..") for segment in segments):
            raise InvalidIdentifierError(identifier, "is not a normalized file path")
        return segments

    def resolve_path(self, identifier: str) -> Path:
        """Map an identifier to a path below the storage root.

        Raises:
            InvalidIdentifierError: If the identifier is malformed or points
                outside the root (e.g. through a symlink).
        """
        path = self.root.joinpath(*self._split_identifier(identifier))
        root = self.root.resolve()
        if root not in path.resolve().parents:
            raise InvalidIdentifierError(identifier, "points outside the storage root")
        return path

    async def has_file(self, identifier: str) -> bool:
        try:
            path = self.resolve_path(identifier)
        except InvalidIdentifierError:
            return False
        return await aiofiles.os.path.isfile(path)

    async def get_file(self, identifier: str) -> FileRecord:
        path = self.resolve_path(identifier)
        if not await aiofiles.os.path.isfile(path):
            raise FileNotFoundError(identifier)

        stat_result = await aiofiles.os.stat(path)
        mime_type, _ = mimetypes.guess_type(path.name)

        properties = {}
        if self.metadata_index is not None:
            metadata = await self.metadata_index.get(identifier)
            if metadata is not None:
                properties = {"visible": metadata.visible, "fe_groups": metadata.fe_groups}

        return FileRecord(
            storage=self,
            identifier=identifier,
            local_path=str(path),
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            size=stat_result.st_size,
            properties=properties,
        )

    def is_within_processing_folder(self, identifier: str) -> bool:
        return identifier == self.processing_folder or identifier.startswith(self.processing_folder + "/")

    def __repr__(self):
        return f"<LocalStorage {self.root}>"
