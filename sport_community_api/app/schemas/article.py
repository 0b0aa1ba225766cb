"""
Pydantic models for articles.

Articles are created from multipart form fields, so ``ArticleCreate``
is assembled by the endpoint from ``Form`` values rather than parsed
from a JSON body.
"""

from typing import List, Optional

from pydantic import BaseModel


class ArticleCreate(BaseModel):
    titre: Optional[str] = None
    description: Optional[str] = None
    corps: Optional[str] = None
    sport: Optional[str] = None
    date: Optional[str] = None


class ArticleRead(BaseModel):
    id_article: int
    titre: str
    description: str
    corps: str
    sport: str
    date: str
    id_media: Optional[int] = None
    # Username of the author at the time of writing.
    auteur: Optional[str] = None


class ArticlePage(BaseModel):
    articles: List[ArticleRead]
    nextPage: Optional[int] = None
