"""
Business logic for text posts and media posts.

Both kinds store a copy of the author's username at write time.  Media
posts write their file and ``medias`` row first, then the post row; the
two inserts only share a transaction when ``ATOMIC_WRITES`` is on.
"""

import logging
from typing import Optional

from fastapi import UploadFile

from ..core.db import Database
from ..core.errors import NotFoundError, require_fields
from ..schemas.post import TextPostCreate
from .media_service import MediaService
from .pagination import next_page
from .user_service import UserService

logger = logging.getLogger(__name__)


class PostService:
    """Service for text and media posts."""

    @classmethod
    def list_text_posts(cls, db: Database, page: int, limit: int) -> dict:
        # page/limit only shape ``nextPage``; every row is returned.
        with db.unit_of_work() as store:
            rows = store.fetch_all("SELECT * FROM post_txt")
        return {"posts": rows, "nextPage": next_page(rows, page, limit)}

    @classmethod
    def get_text_post(cls, db: Database, post_id: int) -> dict:
        with db.unit_of_work() as store:
            row = store.fetch_one("SELECT * FROM post_txt WHERE post_txt_id = ?", (post_id,))
        if not row:
            raise NotFoundError("Post not found")
        return row

    @classmethod
    def create_text_post(cls, db: Database, user_id: int, data: TextPostCreate) -> int:
        """Insert a text post with zero likes and return its id."""
        require_fields("Fields text and description are required", data.text, data.description)
        with db.unit_of_work() as store:
            username = UserService.username_for(store, user_id)
            cursor = store.execute(
                "INSERT INTO post_txt (text, description, user_id, username, likes) VALUES (?, ?, ?, ?, 0)",
                (data.text, data.description, user_id, username),
            )
            post_id = cursor.lastrowid
        logger.info("User %s created text post %s", user_id, post_id)
        return post_id

    @classmethod
    def like_text_post(cls, db: Database, post_id: int) -> None:
        """Add one like to a post, raising ``NotFoundError`` if it does not exist."""
        with db.unit_of_work() as store:
            if not store.fetch_one("SELECT post_txt_id FROM post_txt WHERE post_txt_id = ?", (post_id,)):
                raise NotFoundError("Post not found")
            store.execute("UPDATE post_txt SET likes = likes + 1 WHERE post_txt_id = ?", (post_id,))

    @classmethod
    def list_media_posts(cls, db: Database, page: int, limit: int) -> dict:
        with db.unit_of_work() as store:
            rows = store.fetch_all("SELECT * FROM post_media")
        return {"posts": rows, "nextPage": next_page(rows, page, limit)}

    @classmethod
    def get_media_post(cls, db: Database, post_id: int) -> dict:
        with db.unit_of_work() as store:
            row = store.fetch_one("SELECT * FROM post_media WHERE post_media_id = ?", (post_id,))
        if not row:
            raise NotFoundError("Post not found")
        return row

    @classmethod
    def create_media_post(
        cls,
        db: Database,
        user_id: int,
        description: Optional[str],
        upload: Optional[UploadFile],
        upload_dir: str,
    ) -> int:
        """Store the file, record it, then insert the post.  Returns the post id."""
        require_fields("Field description is required", description)
        upload = MediaService.require_file(upload)
        with db.unit_of_work() as store:
            username = UserService.username_for(store, user_id)
            media_id = MediaService.attach(store, user_id, upload, upload_dir)
            cursor = store.execute(
                "INSERT INTO post_media (id_media, description, username, user_id) VALUES (?, ?, ?, ?)",
                (media_id, description, username, user_id),
            )
            post_id = cursor.lastrowid
        logger.info("User %s created media post %s (media %s)", user_id, post_id, media_id)
        return post_id
