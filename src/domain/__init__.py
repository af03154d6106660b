"""
Domain layer - Pure business logic with zero framework imports.

This package contains the create-user operation and the port interfaces
it depends on, so storage and email delivery stay swappable adapters.
"""

from .exceptions import ErrorKind, InvalidArgument, UserServiceException, translate_failures
from .identity import generate_user_id
from .ports import (
    ConfirmationFailurePolicy,
    EmailVerificationService,
    RegistrationStep,
    UserRepository,
)
from .user import User, build_user
from .user_service import UserService
from .validation import validate_registration

__all__ = [
    "ConfirmationFailurePolicy",
    "EmailVerificationService",
    "ErrorKind",
    "InvalidArgument",
    "RegistrationStep",
    "User",
    "UserRepository",
    "UserService",
    "UserServiceException",
    "build_user",
    "generate_user_id",
    "translate_failures",
    "validate_registration",
]
