"""
Business logic for the two-step profile bootstrap.

Step one creates the ``profil`` row (with a ``medias`` row for the
photo, even when no photo was sent).  Step two fills in the followed
sports by username.  Nothing ties the steps together: step two on a
username without a profile changes no row and still succeeds, and
running step one twice creates two profiles.
"""

import json
import logging
from typing import Any, Optional

from fastapi import UploadFile

from ..core.db import Database
from ..core.errors import BadRequestError, require_fields
from ..core.uploads import ensure_allowed
from .media_service import MediaService
from .user_service import UserService

logger = logging.getLogger(__name__)


class ProfileService:

    @classmethod
    def create_profile(
        cls,
        db: Database,
        username: Optional[str],
        sports_pratiques: Optional[str],
        photo: Optional[UploadFile],
        upload_dir: str,
    ) -> int:
        """Create a profile for ``username`` and return its id.

        ``sports_pratiques`` must be JSON text; it is stored re-encoded.
        """
        require_fields("Username and sports_pratiques are required", username, sports_pratiques)
        try:
            practiced = json.loads(sports_pratiques)
        except json.JSONDecodeError as exc:
            raise BadRequestError("sports_pratiques must be a valid JSON array") from exc

        if photo is not None and photo.filename:
            ensure_allowed(photo)
        else:
            logger.info("Profile for %s created without a photo", username)
            photo = None

        with db.unit_of_work() as store:
            user_id = UserService.id_for_username(store, username)
            media_id = MediaService.attach(store, user_id, photo, upload_dir)
            cursor = store.execute(
                "INSERT INTO profil (username, photo_profil, sports_pratiques) VALUES (?, ?, ?)",
                (username, media_id, json.dumps(practiced)),
            )
            profile_id = cursor.lastrowid
        logger.info("Created profile %s for %s", profile_id, username)
        return profile_id

    @classmethod
    def set_followed_sports(cls, db: Database, username: Optional[str], sports_suivis: Any) -> int:
        """Store ``sports_suivis`` on the profile of ``username``.

        Returns the number of rows updated, which is 0 when the profile
        does not exist.
        """
        require_fields("Username is required", username)
        encoded = json.dumps(sports_suivis) if sports_suivis is not None else None
        with db.unit_of_work() as store:
            cursor = store.execute(
                "UPDATE profil SET sports_suivis = ? WHERE username = ?",
                (encoded, username),
            )
            return cursor.rowcount
