from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from apps.filegate.models import FileMetadata


class MetadataIndex:
    """Looks up access metadata of files by their storage identifier."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def get(self, identifier: str) -> Optional[FileMetadata]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(FileMetadata).where(FileMetadata.identifier == identifier)
            )
            return result.scalar_one_or_none()
