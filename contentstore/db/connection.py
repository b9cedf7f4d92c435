"""Database connection management."""

from contextlib import contextmanager
from typing import Generator, Optional

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from ..config import PostgresConfig

_connection_pool: Optional[ConnectionPool] = None


def get_connection_pool(config: PostgresConfig) -> ConnectionPool:
    """Get or create the process-wide pool for ``config``."""
    global _connection_pool
    if _connection_pool is None:
        _connection_pool = ConnectionPool(
            config.conninfo,
            min_size=1,
            max_size=config.pool_max_size,
            kwargs={"row_factory": dict_row},
            open=True,
        )
    return _connection_pool


def close_connection_pool() -> None:
    """Close the shared pool, if one was opened."""
    global _connection_pool
    if _connection_pool is not None:
        _connection_pool.close()
        _connection_pool = None


@contextmanager
def get_connection(config: PostgresConfig) -> Generator[psycopg.Connection, None, None]:
    """Get a database connection from the pool."""
    pool = get_connection_pool(config)
    with pool.connection() as conn:
        yield conn
