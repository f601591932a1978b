"""File listing schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class FileRecord(BaseModel):
    """One immediate child of a listed directory."""
    id: int = Field(ge=1)
    name: str
    size: int
    is_dir: bool = False
    mime_type: str
    created_at: datetime  # mtime; no creation time is available
    updated_at: datetime


class CurrentPath(BaseModel):
    """Configured root directory, as given at startup."""
    dirPath: str


class ErrorBody(BaseModel):
    error: str
