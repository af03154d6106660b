"""
User entity - Immutable record of a registered identity.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """
    A registered user.

    Instances are frozen: once built they are never mutated. The raw
    password is never stored; only its opaque hash is kept, and it is
    left out of repr().
    """

    id: str
    first_name: str
    last_name: str
    email: str
    password_hash: str | None = field(default=None, repr=False)


def build_user(
    user_id: str,
    first_name: str,
    last_name: str,
    email: str,
    password_hash: str | None = None,
) -> User:
    """
    Assemble a User from already-validated fields.

    Does not re-validate; callers run validate_registration() first.
    """
    return User(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=password_hash,
    )
