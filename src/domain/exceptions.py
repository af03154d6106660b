"""
Domain exceptions - Semantic error types for user registration.

Two error kinds are reported by the registration operation:

- InvalidArgument: caller-supplied data violates a precondition.
- UserServiceException: a collaborator (user store or confirmation
  scheduler) failed. The original fault is chained as __cause__.

Neither inherits from the other. Each carries a ``kind`` tag so callers
can dispatch on ErrorKind without relying on the class hierarchy.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from .ports import RegistrationStep

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Reported error categories for registration failures."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    USER_SERVICE = "USER_SERVICE"


class InvalidArgument(ValueError):
    """Registration input violates a field-level precondition."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UserServiceException(Exception):
    """Persistence or confirmation scheduling failed during registration."""

    kind = ErrorKind.USER_SERVICE

    def __init__(
        self, message: str, step: RegistrationStep, user_id: str | None = None
    ) -> None:
        super().__init__(message)
        self.step = step
        self.user_id = user_id


_STEP_MESSAGES = {
    RegistrationStep.PERSIST: "Could not persist user",
    RegistrationStep.CONFIRM: "Could not schedule email confirmation",
}


@contextmanager
def translate_failures(step: RegistrationStep, user_id: str | None = None) -> Iterator[None]:
    """
    Re-raise any collaborator fault as UserServiceException.

    Args:
        step: Registration step being executed (used in message and context)
        user_id: Id of the user being registered, if already assigned

    Raises:
        UserServiceException: Wrapping whatever the block raised
    """
    try:
        yield
    except Exception as exc:
        message = _STEP_MESSAGES.get(step, "User registration failed")
        logger.warning("%s (user_id=%s): %r", message, user_id, exc, exc_info=True)
        raise UserServiceException(message, step=step, user_id=user_id) from exc
