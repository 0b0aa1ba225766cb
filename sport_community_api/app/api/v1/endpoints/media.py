"""
Media endpoints.

Uploads are accepted one file at a time under the ``file`` field.
Stored files can be fetched by name or by media id without
authentication; listing a user's media requires a token.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse

from sport_community_api.app.core.config import Settings, get_settings
from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.core.security import get_current_user
from sport_community_api.app.schemas.media import MediaRead, UploadResponse
from sport_community_api.app.services.media_service import MediaService

router = APIRouter()


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
def upload_media(
    file: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UploadResponse:
    """Store an image or video for the caller and return its media id."""
    try:
        media_id = MediaService.upload(db, current_user["id"], file, settings.upload_dir)
    except ValueError as e:
        raise to_http(e) from e
    return UploadResponse(message="Media uploaded successfully", mediaId=media_id)


@router.get("/media/file/{filename}")
def get_media_file(filename: str, settings: Settings = Depends(get_settings)) -> FileResponse:
    try:
        path = MediaService.file_by_name(settings.upload_dir, filename)
    except ValueError as e:
        raise to_http(e) from e
    return FileResponse(path)


@router.get("/media/id/{id_media}")
def get_media_file_by_id(
    id_media: int,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> FileResponse:
    try:
        path = MediaService.file_by_id(db, id_media, settings.upload_dir)
    except ValueError as e:
        raise to_http(e) from e
    return FileResponse(path)


@router.get("/media/{user_id}", response_model=List[MediaRead])
def list_user_media(
    user_id: int,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> List[MediaRead]:
    """List every media row owned by ``user_id``; 404 if there is none."""
    try:
        return MediaService.list_for_user(db, user_id)
    except ValueError as e:
        raise to_http(e) from e
