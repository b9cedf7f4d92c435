"""ContentStore façade over the per-table managers."""

import hmac
import logging
from contextlib import contextmanager
from typing import Any, Generator, Iterable, List, Optional

import pendulum
from psycopg import Connection

from .config import Config, ShortcutConfig
from .db import get_connection
from .db.articles import ArticleStorage
from .db.assets import AssetStorage
from .db.counters import CounterManager
from .db.pages import PageManager
from .db.sessions import SessionManager
from .errors import AuthenticationFailed, NotFound, Unauthorized
from .ids import generate_id
from .models import (
    Actor,
    Article,
    ArticleStamp,
    ArticleSummary,
    AssetUpload,
    SearchResult,
    Session,
    StoredAsset,
)

logger = logging.getLogger(__name__)


def require_actor(actor: Optional[Actor]) -> Actor:
    """Reject anything that is not an authenticated actor."""
    if not isinstance(actor, Actor):
        raise Unauthorized("Not authorized")
    return actor


class ContentStore:
    """Articles, pages, counters, sessions and assets on one connection.

    Mutating operations take the ``Actor`` returned by
    ``get_current_user``; storage errors from psycopg propagate unchanged.
    """

    def __init__(
        self,
        conn: Connection,
        admin_password: Optional[str] = None,
        shortcuts: Iterable[ShortcutConfig] = (),
        article_url_prefix: str = "/blog/",
        session_timeout_minutes: int = 60 * 24,
    ) -> None:
        self.conn = conn
        self._admin_password = admin_password
        self.shortcuts = tuple(shortcuts)
        self.article_url_prefix = article_url_prefix
        self.session_timeout_minutes = session_timeout_minutes

        self.articles = ArticleStorage()
        self.pages = PageManager()
        self.counters = CounterManager()
        self.sessions = SessionManager()
        self.assets = AssetStorage()

    @classmethod
    def from_config(cls, config: Config, conn: Connection) -> "ContentStore":
        """Build a store from loaded configuration."""
        return cls(
            conn,
            admin_password=config.get_admin_password(),
            shortcuts=config.shortcuts,
            article_url_prefix=config.config.blog.article_url_prefix,
            session_timeout_minutes=config.config.admin.session_timeout_minutes,
        )

    # Articles

    def create_article(
        self, title: str, content: str, teaser: str, actor: Optional[Actor]
    ) -> ArticleStamp:
        require_actor(actor)
        return self.articles.create_article(self.conn, title, content, teaser)

    def update_article(
        self, slug: str, title: str, content: str, teaser: str, actor: Optional[Actor]
    ) -> ArticleStamp:
        require_actor(actor)
        stamp = self.articles.update_article(self.conn, slug, title, content, teaser)
        if stamp is None:
            raise NotFound(f"Article not found: {slug}")
        return stamp

    def delete_article(self, slug: str, actor: Optional[Actor]) -> bool:
        require_actor(actor)
        return self.articles.delete_article(self.conn, slug)

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        return self.articles.get_article(self.conn, slug)

    def get_articles(self, actor: Optional[Actor] = None) -> List[Article]:
        """All articles for an admin, published ones otherwise."""
        return self.articles.get_articles(self.conn, include_unpublished=isinstance(actor, Actor))

    def get_next_article(self, slug: str) -> Optional[ArticleSummary]:
        return self.articles.get_next_article(self.conn, slug)

    def search(
        self,
        query: str,
        actor: Optional[Actor] = None,
        shortcuts: Optional[Iterable[ShortcutConfig]] = None,
    ) -> List[SearchResult]:
        """
        Search article titles, then append matching static shortcuts.

        Article hits follow the same visibility rule as ``get_articles``.
        """
        results = self.articles.search(
            self.conn,
            query,
            include_unpublished=isinstance(actor, Actor),
            url_prefix=self.article_url_prefix,
        )

        needle = query.lower()
        for shortcut in self.shortcuts if shortcuts is None else shortcuts:
            if needle in shortcut.name.lower():
                results.append(SearchResult(name=shortcut.name, url=shortcut.url))

        return results

    # Sessions

    def authenticate(self, password: str, session_timeout_minutes: Optional[int] = None) -> Session:
        """
        Log in as administrator.

        A successful login also purges expired sessions. Without a configured
        admin password every attempt fails.
        """
        if session_timeout_minutes is None:
            session_timeout_minutes = self.session_timeout_minutes

        now = pendulum.now("UTC")
        expires = now.add(minutes=session_timeout_minutes)

        if self._admin_password is None:
            logger.warning("Admin login attempted but no admin password is configured")
            raise AuthenticationFailed("Authentication failed.")

        if not hmac.compare_digest(password.encode(), self._admin_password.encode()):
            logger.warning("Failed admin login attempt")
            raise AuthenticationFailed("Authentication failed.")

        self.sessions.purge_expired(self.conn, now)
        return self.sessions.create_session(self.conn, generate_id(), expires)

    def destroy_session(self, session_id: str) -> bool:
        self.sessions.delete_session(self.conn, session_id)
        return True

    def get_current_user(self, session_id: str) -> Optional[Actor]:
        return self.sessions.get_current_user(self.conn, session_id, pendulum.now("UTC"))

    def purge_expired_sessions(self) -> int:
        return self.sessions.purge_expired(self.conn, pendulum.now("UTC"))

    # Pages and counters

    def create_or_update_page(self, page_id: str, page_data: Any, actor: Optional[Actor]) -> str:
        require_actor(actor)
        return self.pages.upsert_page(self.conn, page_id, page_data)

    def get_page(self, page_id: str) -> Optional[Any]:
        return self.pages.get_page(self.conn, page_id)

    def create_or_update_counter(self, counter_id: str) -> int:
        return self.counters.increment(self.conn, counter_id)

    # Assets

    def store_asset(self, asset_id: str, upload: AssetUpload) -> None:
        self.assets.store_asset(self.conn, asset_id, upload, pendulum.now("UTC"))

    def get_asset(self, asset_id: str) -> StoredAsset:
        row = self.assets.get_asset(self.conn, asset_id)
        if row is None:
            raise NotFound(f"Asset not found: {asset_id}")
        return StoredAsset.from_row(row)


@contextmanager
def open_store(config: Config) -> Generator[ContentStore, None, None]:
    """Open a store on a pooled connection."""
    with get_connection(config.get_db_config()) as conn:
        yield ContentStore.from_config(config, conn)
