"""Pydantic models for uploaded media."""

from typing import Optional

from pydantic import BaseModel


class MediaRead(BaseModel):
    """A row of the ``medias`` table."""

    id_media: int
    user_id: Optional[int] = None
    filename: Optional[str] = None
    filetype: Optional[str] = None
    # Null for a profile created without a photo.
    filepath: Optional[str] = None
    created_at: Optional[str] = None


class UploadResponse(BaseModel):
    message: str
    mediaId: int
