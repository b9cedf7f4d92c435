"""Database initialization and schema management."""

import logging

from psycopg import Connection
from psycopg.errors import DatabaseError

from ..config import PostgresConfig
from .connection import get_connection

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
-- Articles table
CREATE TABLE IF NOT EXISTS articles (
    slug TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    content TEXT NOT NULL DEFAULT '',
    teaser TEXT NOT NULL DEFAULT '',
    created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMPTZ,
    published_at TIMESTAMPTZ
);

-- Pages table
CREATE TABLE IF NOT EXISTS pages (
    page_id TEXT PRIMARY KEY,
    data JSONB,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- Counters table
CREATE TABLE IF NOT EXISTS counters (
    counter_id TEXT PRIMARY KEY,
    count INTEGER NOT NULL DEFAULT 1 CHECK (count >= 1)
);

-- Sessions table
CREATE TABLE IF NOT EXISTS sessions (
    session_id TEXT PRIMARY KEY,
    expires TIMESTAMPTZ NOT NULL
);

-- Assets table
CREATE TABLE IF NOT EXISTS assets (
    asset_id TEXT PRIMARY KEY,
    mime_type TEXT NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL,
    size INTEGER NOT NULL CHECK (size >= 0),
    data BYTEA NOT NULL
);

-- Create indexes
CREATE INDEX IF NOT EXISTS idx_articles_published_at ON articles(published_at);
CREATE INDEX IF NOT EXISTS idx_sessions_expires ON sessions(expires);
"""


def create_schema(conn: Connection) -> None:
    """Create all tables on an open connection."""
    with conn.cursor() as cur:
        cur.execute(SCHEMA_SQL)
    conn.commit()


def validate_connection(config: PostgresConfig) -> bool:
    """Validate database connection."""
    try:
        with get_connection(config) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1 AS ok")
                result = cur.fetchone()
                return result is not None and result["ok"] == 1
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        return False


def init_database(config: PostgresConfig) -> None:
    """Initialize database schema."""
    try:
        with get_connection(config) as conn:
            create_schema(conn)
            logger.info("Database schema initialized successfully")
    except DatabaseError as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise
