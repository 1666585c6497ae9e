"""Storage interface consumed by the access gate.

Classes:
    FileRecord: Read-only view of a file resolved from a storage.
    ResourceStorage: Abstract base class for storages holding protected files.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, FrozenSet, Optional

from apps.filegate.groups import parse_group_list


class FileRecord:
    """A file resolved from a storage together with its access metadata.

    Properties that are not set for the file are absent from ``properties``
    (a ``None`` value counts as absent).
    """

    def __init__(
        self,
        storage: "ResourceStorage",
        identifier: str,
        local_path: str,
        mime_type: str,
        size: int,
        properties: Optional[Dict[str, Any]] = None,
    ):
        self.storage = storage
        self.identifier = identifier
        self.local_path = local_path
        self.mime_type = mime_type
        self.size = size
        self.properties = {k: v for k, v in (properties or {}).items() if v is not None}

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def get_property(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)

    @property
    def visible(self) -> bool:
        return bool(self.get_property("visible")) if self.has_property("visible") else True

    @property
    def fe_groups(self) -> str:
        return str(self.get_property("fe_groups") or "")

    @property
    def access_groups(self) -> FrozenSet[int]:
        """Group ids listed in fe_groups.

        Raises:
            InvalidGroupListError: If fe_groups holds a non-numeric token.
        """
        return parse_group_list(self.fe_groups)

    def get_for_local_processing(self) -> str:
        """Return a path to a locally readable copy of the file."""
        return self.local_path

    def __repr__(self):
        return f"<FileRecord {self.identifier} ({self.mime_type}, {self.size} bytes)>"


class ResourceStorage(abc.ABC):
    """Abstract base class for storages the access gate can protect."""

    @abc.abstractmethod
    async def has_file(self, identifier: str) -> bool:
        """Check whether a file exists at the given identifier.

        Args:
            identifier: Storage-relative path starting with ``/``.

        Returns:
            True if a regular file exists there, False otherwise (including
            for malformed identifiers).
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_file(self, identifier: str) -> FileRecord:
        """Resolve the file at the given identifier.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            FileNotFoundError: If no file exists at the identifier.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def is_within_processing_folder(self, identifier: str) -> bool:
        """Check whether the identifier lies in the folder of generated derivatives."""
        raise NotImplementedError
