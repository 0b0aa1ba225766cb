"""
Pydantic models for text and media posts.

``username`` on both post kinds is a copy of the author's username
taken when the post was written; it is not updated afterwards.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class TextPostCreate(BaseModel):
    """Payload for ``POST /posts-txt``."""

    text: Optional[str] = Field(None, examples=["hi"])
    description: Optional[str] = Field(None, examples=["d"])


class TextPostRead(BaseModel):
    post_txt_id: int
    text: str
    description: str
    user_id: int
    username: str
    likes: int = 0
    created_at: Optional[str] = None


class TextPostPage(BaseModel):
    posts: List[TextPostRead]
    nextPage: Optional[int] = None


class MediaPostRead(BaseModel):
    post_media_id: int
    id_media: int
    description: str
    user_id: int
    username: str
    created_at: Optional[str] = None


class MediaPostPage(BaseModel):
    posts: List[MediaPostRead]
    nextPage: Optional[int] = None
