"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository
from src.adapters.smtp.console import ConsoleEmailVerificationService
from src.config.settings import get_settings
from src.domain.user_service import UserService

# Module-level singleton - ConsoleEmailVerificationService is stateless
_email_verification = ConsoleEmailVerificationService()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_email_verification() -> ConsoleEmailVerificationService:
    """Get console email verification service (singleton)."""
    return _email_verification


def get_user_service(request: Request) -> UserService:
    """
    Create user service with injected dependencies.

    Wires together the repository, the confirmation scheduler and the
    configured policy for the domain service.
    """
    settings = get_settings()
    return UserService(
        repository=get_repository(request),
        email_verification=get_email_verification(),
        confirmation_failure_policy=settings.confirmation_failure_policy,
        bcrypt_cost=settings.bcrypt_cost,
    )
