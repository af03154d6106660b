"""
Shared fixtures for integration tests.

Provides a PostgreSQL connection pool with migrations applied. Tests that
use it are skipped when the configured database is unreachable.
"""

from collections.abc import Callable, Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository, run_migrations
from src.config.settings import get_settings
from src.domain.user import User


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for integration tests."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError as exc:
        pytest.skip(f"PostgreSQL not available: {exc}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def repository(pool: ConnectionPool) -> PostgresUserRepository:
    """Create repository instance for each test."""
    return PostgresUserRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Clean users table before each test that touches the database."""
    if "pool" in request.fixturenames:
        pool = request.getfixturevalue("pool")
        with pool.connection() as conn:
            conn.execute("DELETE FROM users")
            conn.commit()
    yield


@pytest.fixture
def fetch_user(pool: ConnectionPool) -> Callable[[str], User | None]:
    """Return a lookup that loads a stored user by id, or None if absent."""

    def fetch(user_id: str) -> User | None:
        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                "SELECT id, first_name, last_name, email, password_hash FROM users WHERE id = %s",
                (user_id,),
            )
            row = cursor.fetchone()
        if row is None:
            return None
        return User(
            id=str(row[0]),
            first_name=row[1],
            last_name=row[2],
            email=row[3],
            password_hash=row[4],
        )

    return fetch
