"""Admin session management in database."""

import logging
from datetime import datetime
from typing import Optional

from psycopg import Connection

from ..models import ADMIN, Actor, Session

logger = logging.getLogger(__name__)


class SessionManager:
    """Manage admin sessions in database."""

    def purge_expired(self, conn: Connection, now: datetime) -> int:
        """
        Delete every session that is no longer valid at ``now``.

        Returns:
            Number of sessions removed
        """
        with conn.cursor() as cur:
            cur.execute("DELETE FROM sessions WHERE expires <= %s", (now,))
            purged = cur.rowcount

        conn.commit()
        if purged:
            logger.info("Purged %d expired sessions", purged)
        return purged

    def create_session(self, conn: Connection, session_id: str, expires: datetime) -> Session:
        """Insert a new session."""
        with conn.cursor() as cur:
            cur.execute(
                "INSERT INTO sessions (session_id, expires) VALUES (%s, %s)",
                (session_id, expires),
            )

        conn.commit()
        return Session(session_id=session_id, expires=expires)

    def delete_session(self, conn: Connection, session_id: str) -> None:
        """Delete a session whether or not it exists."""
        with conn.cursor() as cur:
            cur.execute("DELETE FROM sessions WHERE session_id = %s", (session_id,))

        conn.commit()

    def get_current_user(
        self,
        conn: Connection,
        session_id: str,
        now: datetime,
    ) -> Optional[Actor]:
        """Return the admin actor if the session is valid at ``now``."""
        with conn.cursor() as cur:
            cur.execute(
                """
                SELECT session_id, expires
                FROM sessions
                WHERE session_id = %s AND expires > %s
                """,
                (session_id, now),
            )
            row = cur.fetchone()
        return ADMIN if row else None
