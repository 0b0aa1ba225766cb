"""
Business logic for uploaded media.

A ``medias`` row is only written after the file itself has been stored
on disk.  Other services call ``MediaService.attach`` from inside their
own unit of work so that the media insert and the resource insert run
on the same connection.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fastapi import UploadFile

from ..core.db import Database, Store
from ..core.errors import BadRequestError, NotFoundError
from ..core.uploads import StoredFile, ensure_allowed, filename_from_path, locate, save_upload

logger = logging.getLogger(__name__)


class MediaService:
    """Service for storing and looking up media files."""

    @staticmethod
    def require_file(upload: Optional[UploadFile]) -> UploadFile:
        """Return ``upload`` after checking it is present and of an allowed type."""
        if upload is None or not upload.filename:
            raise BadRequestError("A file is required")
        ensure_allowed(upload)
        return upload

    @staticmethod
    def insert(store: Store, user_id: int, stored: Optional[StoredFile]) -> int:
        """Insert a ``medias`` row; ``stored`` may be ``None`` for a missing photo."""
        cursor = store.execute(
            "INSERT INTO medias (user_id, filename, filetype, filepath) VALUES (?, ?, ?, ?)",
            (
                user_id,
                stored.filename if stored else None,
                stored.filetype if stored else None,
                stored.filepath if stored else None,
            ),
        )
        return cursor.lastrowid

    @classmethod
    def attach(cls, store: Store, user_id: int, upload: Optional[UploadFile], upload_dir: str) -> int:
        """Write ``upload`` to disk (if any) and record it, returning the media id."""
        stored = save_upload(upload, upload_dir) if upload is not None else None
        media_id = cls.insert(store, user_id, stored)
        logger.info("Media %s recorded for user %s", media_id, user_id)
        return media_id

    @classmethod
    def upload(cls, db: Database, user_id: int, upload: Optional[UploadFile], upload_dir: str) -> int:
        """Handle ``POST /upload`` and return the new media id."""
        upload = cls.require_file(upload)
        with db.unit_of_work() as store:
            if not store.fetch_one("SELECT user_id FROM users WHERE user_id = ?", (user_id,)):
                logger.warning("Upload attempted for unknown user %s", user_id)
                raise NotFoundError("User not found")
            return cls.attach(store, user_id, upload, upload_dir)

    @classmethod
    def list_for_user(cls, db: Database, user_id: int) -> List[dict]:
        with db.unit_of_work() as store:
            rows = store.fetch_all("SELECT * FROM medias WHERE user_id = ?", (user_id,))
        if not rows:
            raise NotFoundError("No media found for this user")
        return rows

    @classmethod
    def file_by_name(cls, upload_dir: str, filename: str) -> Path:
        return locate(upload_dir, filename)

    @classmethod
    def file_by_id(cls, db: Database, media_id: int, upload_dir: str) -> Path:
        """Return the on-disk file of media ``media_id``.

        Raises ``NotFoundError`` if the row is missing, has no file, or
        the file is gone from disk.
        """
        with db.unit_of_work() as store:
            row = store.fetch_one("SELECT filepath FROM medias WHERE id_media = ?", (media_id,))
        if not row:
            raise NotFoundError("Media not found")
        filename = filename_from_path(row["filepath"])
        if not filename:
            raise NotFoundError("File not found")
        return locate(upload_dir, filename)
