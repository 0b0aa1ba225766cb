"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers (auth, media, posts,
events, etc.).  When new domains are introduced, update this file to
include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    articles,
    auth,
    events,
    health,
    media,
    posts,
    profiles,
    sports,
)

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
# Media and post routers declare full paths (``/upload``, ``/media/...``,
# ``/posts-txt``, ``/posts-media``) so no prefix is added here.
router.include_router(media.router, tags=["media"])
router.include_router(posts.router, tags=["posts"])
router.include_router(articles.router, prefix="/articles", tags=["articles"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(sports.router, prefix="/sports", tags=["sports"])
router.include_router(profiles.router, tags=["profiles"])
