"""
Console email verification adapter - Implements EmailVerificationService protocol.

This module provides a console-based implementation of the domain's
confirmation scheduler port, logging confirmations for demo purposes.
"""

import logging

from src.domain.user import User

logger = logging.getLogger(__name__)


class ConsoleEmailVerificationService:
    """
    Implements EmailVerificationService protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def schedule_email_confirmation(self, user: User) -> None:
        """
        Log the confirmation request (simulates scheduling an email).

        Args:
            user: Newly persisted user
        """
        logger.info("[CONFIRMATION] User: %s Email: %s", user.id, user.email)
