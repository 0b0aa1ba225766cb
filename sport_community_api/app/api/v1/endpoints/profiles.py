"""
Profile bootstrap endpoints.

A profile is built in two unauthenticated calls identified by
username: ``POST /profil-1-2`` (practiced sports and an optional photo
under ``photo_profil``) then ``PUT /profil-2-2`` (followed sports).
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from sport_community_api.app.core.config import Settings, get_settings
from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.schemas.profile import ProfileCreated, ProfileFollowedSports
from sport_community_api.app.services.profile_service import ProfileService

router = APIRouter()


@router.post("/profil-1-2", response_model=ProfileCreated, status_code=status.HTTP_201_CREATED)
def create_profile(
    username: Optional[str] = Form(None),
    sports_pratiques: Optional[str] = Form(None),
    photo_profil: Optional[UploadFile] = File(None),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ProfileCreated:
    """Create a profile.

    ``sports_pratiques`` is a JSON array sent as text, e.g.
    ``["Tennis", "Running"]``.
    """
    try:
        profile_id = ProfileService.create_profile(
            db, username, sports_pratiques, photo_profil, settings.upload_dir
        )
    except ValueError as e:
        raise to_http(e) from e
    return ProfileCreated(message="Profile created successfully", profilId=profile_id)


@router.put("/profil-2-2")
def set_followed_sports(body: ProfileFollowedSports, db: Database = Depends(get_db)) -> dict:
    """Record followed sports.  Succeeds even if the profile does not exist."""
    try:
        ProfileService.set_followed_sports(db, body.username, body.sports_suivis)
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "Profile updated successfully"}
