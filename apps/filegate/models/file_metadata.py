from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Index
import sqlalchemy as sa


class FileMetadata(SQLModel, table=True):
    """Access-related metadata of a file in the default storage.

    A null column means the property is not set for the file.
    """
    __tablename__ = "file_metadata"

    id: Optional[int] = Field(default=None, primary_key=True)
    identifier: str = Field(sa_column=Column(sa.String(1024), unique=True, nullable=False))
    visible: Optional[bool] = Field(default=None, sa_column=Column(sa.Boolean, nullable=True))
    fe_groups: Optional[str] = Field(default=None, sa_column=Column(sa.String(255), nullable=True))

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(sa.DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    )

    def __repr__(self):
        return f"<FileMetadata {self.identifier} (visible: {self.visible}, fe_groups: {self.fe_groups})>"

    __table_args__ = (
        Index('idx_file_metadata_identifier', 'identifier'),
    )
