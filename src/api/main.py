"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "User Registration API v1 - Create users and schedule email confirmation",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the user store for the lifetime of the app.

    On startup the pool is created, the users table is migrated and the
    registration settings in effect are logged. The pool is closed on
    shutdown even if the app exits with an error.
    """
    settings = get_settings()

    logger.info(
        "Starting user registration API (confirmation_failure_policy=%s, bcrypt_cost=%d)",
        settings.confirmation_failure_policy.value,
        settings.bcrypt_cost,
    )

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    try:
        run_migrations(pool)
        app.state.pool = pool
        logger.info("User store ready")
        yield
    finally:
        pool.close()
        logger.info("User store closed")


app = FastAPI(
    title="user-registration",
    description="User Registration API - Validates, persists and confirms new users",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Report whether new users can be stored.

    Queries the users table, so a missing migration fails the check as well
    as a lost connection. The active confirmation failure policy is echoed
    so operators can see what happens to unconfirmed users.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1 FROM users LIMIT 1")

    return {
        "status": "healthy",
        "confirmation_failure_policy": get_settings().confirmation_failure_policy.value,
    }
