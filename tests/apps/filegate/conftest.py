"""
Shared fixtures for filegate tests
"""
from typing import Dict, Optional

import pytest

from apps.filegate.models import FileMetadata
from apps.filegate.storage.local import LocalStorage

PUBLIC_PDF = b"%PDF-1.4 public report"
MEMBERS_PDF = b"%PDF-1.4 members only"
THUMBNAIL_PNG = b"\x89PNG\r\n\x1a\n thumbnail"


class InMemoryMetadataIndex:
    """Metadata index double keyed by identifier"""

    def __init__(self, rows: Optional[Dict[str, FileMetadata]] = None):
        self.rows = rows or {}
        self.lookups = []

    def add(self, identifier: str, visible: Optional[bool] = None, fe_groups: Optional[str] = None):
        self.rows[identifier] = FileMetadata(identifier=identifier, visible=visible, fe_groups=fe_groups)

    async def get(self, identifier: str) -> Optional[FileMetadata]:
        self.lookups.append(identifier)
        return self.rows.get(identifier)


@pytest.fixture
def storage_root(tmp_path):
    """Storage directory with a handful of files"""
    root = tmp_path / "uploads"
    (root / "docs").mkdir(parents=True)
    (root / "_processed_" / "docs").mkdir(parents=True)

    (root / "docs" / "public.pdf").write_bytes(PUBLIC_PDF)
    (root / "docs" / "hidden.pdf").write_bytes(b"%PDF-1.4 hidden")
    (root / "docs" / "members.pdf").write_bytes(MEMBERS_PDF)
    (root / "docs" / "broken.pdf").write_bytes(b"%PDF-1.4 broken groups")
    (root / "docs" / "notes").write_bytes(b"no extension")
    (root / "_processed_" / "docs" / "thumb.png").write_bytes(THUMBNAIL_PNG)
    return root


@pytest.fixture
def metadata_index():
    index = InMemoryMetadataIndex()
    index.add("/docs/hidden.pdf", visible=False)
    index.add("/docs/members.pdf", visible=True, fe_groups="3,7")
    index.add("/docs/broken.pdf", fe_groups="3,abc")
    index.add("/_processed_/docs/thumb.png", visible=False, fe_groups="99")
    return index


@pytest.fixture
def storage(storage_root, metadata_index):
    return LocalStorage(storage_root, metadata_index=metadata_index)
