"""Article storage and queries."""

import logging
from typing import List, Optional

from psycopg import Connection

from ..ids import make_slug, with_suffix
from ..models import Article, ArticleStamp, ArticleSummary, SearchResult

logger = logging.getLogger(__name__)

MODIFIED_AT = "COALESCE(published_at, updated_at, created_at)"
PUBLISHED_ONLY = "published_at IS NOT NULL"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ArticleStorage:
    """Handle article storage, listing and search."""

    def slug_exists(self, conn: Connection, slug: str) -> bool:
        """Check whether a slug is already taken."""
        with conn.cursor() as cur:
            cur.execute("SELECT 1 FROM articles WHERE slug = %s", (slug,))
            return cur.fetchone() is not None

    def create_article(
        self,
        conn: Connection,
        title: str,
        content: str,
        teaser: str,
    ) -> ArticleStamp:
        """
        Insert a new, immediately published article.

        The slug is derived from the title; a taken slug gets a random
        suffix. A collision on the suffixed slug is not retried.

        Returns:
            Slug and creation timestamp
        """
        slug = make_slug(title)
        if self.slug_exists(conn, slug):
            slug = with_suffix(slug)

        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO articles (slug, title, content, teaser, published_at)
                VALUES (%s, %s, %s, %s, CURRENT_TIMESTAMP)
                RETURNING slug, created_at
                """,
                (slug, title, content, teaser),
            )
            row = cur.fetchone()

        conn.commit()
        logger.debug("Created article %s", slug)
        return ArticleStamp(**row)

    def update_article(
        self,
        conn: Connection,
        slug: str,
        title: str,
        content: str,
        teaser: str,
    ) -> Optional[ArticleStamp]:
        """
        Overwrite title, content and teaser; slug and published_at are kept.

        Returns:
            Slug and update timestamp, or None if no article has this slug
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                UPDATE articles
                SET
                    title = %s,
                    content = %s,
                    teaser = %s,
                    updated_at = CURRENT_TIMESTAMP
                WHERE slug = %s
                RETURNING slug, updated_at
                """,
                (title, content, teaser, slug),
            )
            row = cur.fetchone()

        conn.commit()
        return ArticleStamp(**row) if row else None

    def delete_article(self, conn: Connection, slug: str) -> bool:
        """Delete by slug; True if a row was removed."""
        with conn.cursor() as cur:
            cur.execute("DELETE FROM articles WHERE slug = %s", (slug,))
            deleted = cur.rowcount > 0

        conn.commit()
        return deleted

    def get_article(self, conn: Connection, slug: str) -> Optional[Article]:
        """Get article by slug."""
        with conn.cursor() as cur:
            cur.execute(
                f"SELECT *, {MODIFIED_AT} AS modified_at FROM articles WHERE slug = %s",
                (slug,),
            )
            row = cur.fetchone()
        return Article(**row) if row else None

    def get_articles(
        self,
        conn: Connection,
        include_unpublished: bool = False,
    ) -> List[Article]:
        """
        List articles.

        Admin listings include unpublished rows and sort by modified time;
        public listings only show published rows, newest publication first.
        """
        query = f"SELECT *, {MODIFIED_AT} AS modified_at FROM articles"

        if include_unpublished:
            query += " ORDER BY modified_at DESC"
        else:
            query += f" WHERE {PUBLISHED_ONLY} ORDER BY published_at DESC"

        with conn.cursor() as cur:
            cur.execute(query)
            return [Article(**row) for row in cur.fetchall()]

    def get_next_article(self, conn: Connection, slug: str) -> Optional[ArticleSummary]:
        """
        Find the article to read after ``slug``.

        Candidates are the published article immediately older than ``slug``
        and the latest published article other than ``slug``; the older of
        the two wins, so the oldest post wraps around to the newest.
        """
        with conn.cursor() as cur:
            cur.execute(
                f"""
                WITH previous_published AS (
                    SELECT title, teaser, slug, published_at
                    FROM articles
                    WHERE published_at < (SELECT published_at FROM articles WHERE slug = %s)
                    ORDER BY published_at DESC
                    LIMIT 1
                ),
                latest_article AS (
                    SELECT title, teaser, slug, published_at
                    FROM articles
                    WHERE slug <> %s AND {PUBLISHED_ONLY}
                    ORDER BY published_at DESC
                    LIMIT 1
                )
                SELECT title, teaser, slug, published_at
                FROM (
                    SELECT * FROM previous_published
                    UNION
                    SELECT * FROM latest_article
                ) AS candidates
                ORDER BY published_at ASC
                LIMIT 1
                """,
                (slug, slug),
            )
            row = cur.fetchone()
        return ArticleSummary(**row) if row else None

    def search(
        self,
        conn: Connection,
        query: str,
        include_unpublished: bool = False,
        url_prefix: str = "/blog/",
    ) -> List[SearchResult]:
        """Case-insensitive substring search on article titles."""
        sql = f"""
            SELECT title, slug, {MODIFIED_AT} AS modified_at
            FROM articles
            WHERE title ILIKE %s
        """

        if not include_unpublished:
            sql += f" AND {PUBLISHED_ONLY}"

        sql += " ORDER BY modified_at DESC"

        with conn.cursor() as cur:
            cur.execute(sql, (f"%{escape_like(query)}%",))
            return [
                SearchResult(
                    name=row["title"],
                    url=url_prefix + row["slug"],
                    modified_at=row["modified_at"],
                )
                for row in cur.fetchall()
            ]
