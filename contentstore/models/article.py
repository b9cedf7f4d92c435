"""Article models for blog posts and the rows derived from them."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import DBModel


class Article(DBModel):
    """Article model."""

    slug: str = Field(..., description="URL-safe unique key derived from the title")
    title: str = Field(..., description="Article title")
    content: str = Field("", description="Article body")
    teaser: str = Field("", description="Short summary shown in listings")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp")
    modified_at: Optional[datetime] = Field(
        None, description="published_at, else updated_at, else created_at"
    )


class ArticleStamp(BaseModel):
    """Key and timestamp returned after an article write."""

    slug: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ArticleSummary(BaseModel):
    """Article fields needed for next-article navigation."""

    slug: str
    title: str
    teaser: str = ""
    published_at: Optional[datetime] = None


class SearchResult(BaseModel):
    """Search hit: either an article or a static shortcut."""

    name: str
    url: str
    modified_at: Optional[datetime] = None
