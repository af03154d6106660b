"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .user import User


class RegistrationStep(str, Enum):
    """
    Steps of a single create_user call.

    Per-call state machine (forward-only, no retries):
    - Start -> VALIDATE -> PERSIST -> CONFIRM -> Returned

    A failure in any step ends the call in the Failed state. VALIDATE
    failures raise InvalidArgument; PERSIST and CONFIRM failures raise
    UserServiceException tagged with the step.
    """

    VALIDATE = "VALIDATE"
    PERSIST = "PERSIST"
    CONFIRM = "CONFIRM"


class ConfirmationFailurePolicy(str, Enum):
    """
    What happens to a persisted user when confirmation scheduling fails.

    The call fails with UserServiceException under both policies.
    - KEEP_USER: the stored record is left in place
    - DELETE_USER: the service asks the repository to delete it first
    """

    KEEP_USER = "KEEP_USER"
    DELETE_USER = "DELETE_USER"


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def save(self, user: "User") -> bool:
        """
        Persist a newly registered user.

        Args:
            user: Fully built user entity

        Returns:
            True if a record was written. Callers treat a raised exception,
            not the return value, as the failure signal.
        """
        ...

    def delete(self, user_id: str) -> bool:
        """
        Remove a previously saved user.

        Only called under ConfirmationFailurePolicy.DELETE_USER.

        Args:
            user_id: Identifier assigned at registration

        Returns:
            True if a record was removed
        """
        ...


class EmailVerificationService(Protocol):
    """Port interface for email confirmation scheduling."""

    def schedule_email_confirmation(self, user: "User") -> None:
        """
        Schedule delivery of an email confirmation for the user.

        Args:
            user: The user that was just persisted
        """
        ...
