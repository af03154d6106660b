"""Identity assignment for new users."""

import uuid


def generate_user_id() -> str:
    """
    Generate a globally unique, unguessable user identifier.

    uuid4 draws from os.urandom, so concurrent callers need no coordination.
    """
    return str(uuid.uuid4())
