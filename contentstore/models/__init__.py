"""Data models for the content store."""

from .article import Article, ArticleStamp, ArticleSummary, SearchResult
from .asset import AssetPayload, AssetUpload, BytesUpload, StoredAsset
from .session import ADMIN, Actor, Session

__all__ = [
    "ADMIN",
    "Actor",
    "Article",
    "ArticleStamp",
    "ArticleSummary",
    "AssetPayload",
    "AssetUpload",
    "BytesUpload",
    "SearchResult",
    "Session",
    "StoredAsset",
]
