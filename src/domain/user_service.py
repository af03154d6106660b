"""
User service - Registration orchestrator.

This module contains the create-user operation: validation, identity
assignment, persistence, and email confirmation scheduling.

Per-call flow (forward-only, no internal retries)
================================================

    Start -> Validated -> Persisted -> Confirmed -> Returned

Any step may move the call to Failed:
- Validation failure  -> InvalidArgument (never wrapped)
- Store failure       -> UserServiceException(step=PERSIST), scheduler not called
- Scheduler failure   -> UserServiceException(step=CONFIRM), record already stored

A registration whose confirmation cannot be scheduled is reported as failed
even though the user was persisted. Whether that record is kept or deleted
is controlled by ConfirmationFailurePolicy.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import bcrypt

from .exceptions import translate_failures
from .identity import generate_user_id
from .ports import (
    ConfirmationFailurePolicy,
    EmailVerificationService,
    RegistrationStep,
    UserRepository,
)
from .user import User, build_user
from .validation import validate_registration

logger = logging.getLogger(__name__)

# bcrypt only uses the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


@dataclass
class UserService:
    """
    Domain service for user registration.

    Collaborators are passed explicitly at construction; the service keeps
    no per-call state, so one instance may serve concurrent callers.
    """

    repository: UserRepository
    email_verification: EmailVerificationService
    confirmation_failure_policy: ConfirmationFailurePolicy = ConfirmationFailurePolicy.KEEP_USER
    bcrypt_cost: int = 10
    id_factory: Callable[[], str] = generate_user_id

    def create_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str | None,
        repeat_password: str | None,
    ) -> User:
        """
        Register a new user.

        Args:
            first_name: User's first name (must not be blank)
            last_name: User's last name (must not be blank)
            email: User's email address
            password: User's password (hashed before persistence; None stores no credential)
            repeat_password: Password confirmation

        Returns:
            The created User, the same object passed to the confirmation scheduler

        Raises:
            InvalidArgument: If first or last name is blank
            UserServiceException: If persistence or confirmation scheduling fails
        """
        validate_registration(first_name, last_name, email, password, repeat_password)

        user = build_user(
            user_id=self.id_factory(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=self._hash_password(password) if password is not None else None,
        )

        with translate_failures(RegistrationStep.PERSIST, user.id):
            self.repository.save(user)

        try:
            with translate_failures(RegistrationStep.CONFIRM, user.id):
                self.email_verification.schedule_email_confirmation(user)
        except Exception:
            if self.confirmation_failure_policy is ConfirmationFailurePolicy.DELETE_USER:
                self._discard(user)
            raise

        logger.info("Registered user %s", user.id)
        return user

    def _discard(self, user: User) -> None:
        """
        Delete a persisted user whose confirmation could not be scheduled.

        A failing delete is logged; the caller still receives the original
        UserServiceException.
        """
        try:
            self.repository.delete(user.id)
        except Exception:
            logger.exception("Could not delete unconfirmed user %s", user.id)
        else:
            logger.info("Deleted unconfirmed user %s", user.id)

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        secret = password.encode()[:_BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
