"""Article endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from sport_community_api.app.core.config import Settings, get_settings
from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.core.security import get_current_user
from sport_community_api.app.schemas.article import ArticleCreate, ArticlePage, ArticleRead
from sport_community_api.app.services.article_service import ArticleService
from sport_community_api.app.services.pagination import parse_page_params

router = APIRouter()


@router.get("", response_model=ArticlePage)
def list_articles(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Database = Depends(get_db),
) -> ArticlePage:
    page_number, page_size, _offset = parse_page_params(page, limit)
    return ArticleService.list_articles(db, page_number, page_size)


@router.get("/{article_id}", response_model=ArticleRead)
def get_article(article_id: int, db: Database = Depends(get_db)) -> ArticleRead:
    try:
        return ArticleService.get_article(db, article_id)
    except ValueError as e:
        raise to_http(e) from e


@router.post("", status_code=status.HTTP_201_CREATED)
def create_article(
    titre: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    corps: Optional[str] = Form(None),
    sport: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Publish an article with a cover image or video.

    All five text fields and the file are required.  The caller's
    username is recorded as the author.
    """
    data = ArticleCreate(titre=titre, description=description, corps=corps, sport=sport, date=date)
    try:
        article_id, media_id = ArticleService.create_article(
            db, current_user["id"], data, file, settings.upload_dir
        )
    except ValueError as e:
        raise to_http(e) from e
    return {
        "message": "Article and media created successfully",
        "articleId": article_id,
        "mediaId": media_id,
    }
