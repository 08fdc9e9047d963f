from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from sinvoz.config.settings import Settings
from sinvoz.logging.logger import Log

_pool: ConnectionPool | None = None

SCHEMA = """
CREATE TABLE IF NOT EXISTS presentations (
    id BIGSERIAL PRIMARY KEY,
    nombre TEXT NOT NULL,
    imagen TEXT NOT NULL,
    titulos JSONB NOT NULL DEFAULT '[]'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE INDEX IF NOT EXISTS presentations_nombre_idx ON presentations (nombre);
"""


def init_pool(settings: Settings) -> None:
    """Initialize the global connection pool from settings."""
    global _pool  # noqa: PLW0603
    _pool = ConnectionPool(
        settings.db_conninfo,
        min_size=1,
        max_size=settings.db_pool_max_size,
        open=True,
    )
    try:
        _pool.wait(timeout=settings.db_connect_timeout_seconds)
    except Exception:
        _pool.close()
        _pool = None
        raise
    Log.info(f"Connected to PostgreSQL at {settings.db_host}:{settings.db_port}")


def close_pool() -> None:
    """Close the global connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a connection from the pool. Caller manages commit/rollback."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn


def ensure_schema() -> None:
    """Create the presentations table if it does not exist yet."""
    with get_connection() as conn:
        conn.execute(SCHEMA)
        conn.commit()
