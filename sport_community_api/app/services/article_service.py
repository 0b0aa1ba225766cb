"""Business logic for articles."""

import logging
from typing import Optional, Tuple

from fastapi import UploadFile

from ..core.db import Database
from ..core.errors import NotFoundError, require_fields
from ..schemas.article import ArticleCreate
from .media_service import MediaService
from .pagination import next_page
from .user_service import UserService

logger = logging.getLogger(__name__)


class ArticleService:

    @classmethod
    def list_articles(cls, db: Database, page: int, limit: int) -> dict:
        with db.unit_of_work() as store:
            rows = store.fetch_all("SELECT * FROM articles")
        return {"articles": rows, "nextPage": next_page(rows, page, limit)}

    @classmethod
    def get_article(cls, db: Database, article_id: int) -> dict:
        with db.unit_of_work() as store:
            row = store.fetch_one("SELECT * FROM articles WHERE id_article = ?", (article_id,))
        if not row:
            raise NotFoundError("Article not found")
        return row

    @classmethod
    def create_article(
        cls,
        db: Database,
        user_id: int,
        data: ArticleCreate,
        upload: Optional[UploadFile],
        upload_dir: str,
    ) -> Tuple[int, int]:
        """Create an article with its cover media.

        Returns ``(article_id, media_id)``.  The author's username is
        stored in ``auteur``.
        """
        require_fields(
            "Fields titre, description, corps, sport and date are required",
            data.titre,
            data.description,
            data.corps,
            data.sport,
            data.date,
        )
        upload = MediaService.require_file(upload)
        with db.unit_of_work() as store:
            username = UserService.username_for(store, user_id)
            media_id = MediaService.attach(store, user_id, upload, upload_dir)
            cursor = store.execute(
                """
                INSERT INTO articles (titre, description, corps, sport, date, id_media, auteur)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (data.titre, data.description, data.corps, data.sport, data.date, media_id, username),
            )
            article_id = cursor.lastrowid
        logger.info("User %s published article %s", user_id, article_id)
        return article_id, media_id
