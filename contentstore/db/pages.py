"""JSON page storage."""

from typing import Any, Optional

from psycopg import Connection
from psycopg.types.json import Jsonb


class PageManager:
    """Manage JSON pages in database."""

    def upsert_page(self, conn: Connection, page_id: str, data: Any) -> str:
        """
        Insert or replace a page payload.

        Returns:
            Page ID of the affected row
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO pages (page_id, data, updated_at)
                VALUES (%s, %s, CURRENT_TIMESTAMP)
                ON CONFLICT (page_id) DO UPDATE SET
                    data = EXCLUDED.data,
                    updated_at = EXCLUDED.updated_at
                RETURNING page_id
                """,
                (page_id, Jsonb(data)),
            )
            row = cur.fetchone()

        conn.commit()
        return row["page_id"]

    def get_page(self, conn: Connection, page_id: str) -> Optional[Any]:
        """Get decoded page payload."""
        with conn.cursor() as cur:
            cur.execute("SELECT data FROM pages WHERE page_id = %s", (page_id,))
            row = cur.fetchone()
        return row["data"] if row else None
