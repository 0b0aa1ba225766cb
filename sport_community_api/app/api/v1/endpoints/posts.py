"""
Post endpoints: text posts under ``/posts-txt`` and media posts under
``/posts-media``.

The list routes accept ``page`` and ``limit`` but return every post;
the two parameters only determine ``nextPage``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from sport_community_api.app.core.config import Settings, get_settings
from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.core.security import get_current_user
from sport_community_api.app.schemas.post import (
    MediaPostPage,
    MediaPostRead,
    TextPostCreate,
    TextPostPage,
    TextPostRead,
)
from sport_community_api.app.services.pagination import parse_page_params
from sport_community_api.app.services.post_service import PostService

router = APIRouter()


@router.get("/posts-txt", response_model=TextPostPage)
def list_text_posts(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Database = Depends(get_db),
) -> TextPostPage:
    page_number, page_size, _offset = parse_page_params(page, limit)
    return PostService.list_text_posts(db, page_number, page_size)


@router.get("/posts-txt/{post_id}", response_model=TextPostRead)
def get_text_post(post_id: int, db: Database = Depends(get_db)) -> TextPostRead:
    try:
        return PostService.get_text_post(db, post_id)
    except ValueError as e:
        raise to_http(e) from e


@router.post("/posts-txt", status_code=status.HTTP_201_CREATED)
def create_text_post(
    post: TextPostCreate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    """Publish a text post as the caller.  Responds with the new ``postId``."""
    try:
        post_id = PostService.create_text_post(db, current_user["id"], post)
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "Post created successfully", "postId": post_id}


@router.post("/posts-txt/{post_id}/like")
def like_text_post(
    post_id: int,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    try:
        PostService.like_text_post(db, post_id)
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "Like added successfully"}


@router.get("/posts-media", response_model=MediaPostPage)
def list_media_posts(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Database = Depends(get_db),
) -> MediaPostPage:
    page_number, page_size, _offset = parse_page_params(page, limit)
    return PostService.list_media_posts(db, page_number, page_size)


@router.get("/posts-media/{post_id}", response_model=MediaPostRead)
def get_media_post(post_id: int, db: Database = Depends(get_db)) -> MediaPostRead:
    try:
        return PostService.get_media_post(db, post_id)
    except ValueError as e:
        raise to_http(e) from e


@router.post("/posts-media", status_code=status.HTTP_201_CREATED)
def create_media_post(
    description: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Publish an image or video with a description.

    Multipart form with ``description`` and a ``file``.
    """
    try:
        post_id = PostService.create_media_post(
            db, current_user["id"], description, file, settings.upload_dir
        )
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "Media post created successfully", "postMediaId": post_id}
