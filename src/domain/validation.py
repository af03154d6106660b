"""
Registration input validation.

Checks run fail-fast in a fixed order: first name, then last name.
Email format and password/repeat-password equality are not enforced here.
"""

from .exceptions import InvalidArgument

FIRST_NAME_EMPTY = "User's first name is empty"
LAST_NAME_EMPTY = "User's last name is empty"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_registration(
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    password: str | None,
    repeat_password: str | None,
) -> None:
    """
    Validate raw registration fields.

    Args:
        first_name: User's first name
        last_name: User's last name
        email: User's email (format unchecked)
        password: Raw password (unchecked)
        repeat_password: Password confirmation (unchecked)

    Raises:
        InvalidArgument: On the first violated rule
    """
    if _is_blank(first_name):
        raise InvalidArgument(FIRST_NAME_EMPTY, field="first_name")
    if _is_blank(last_name):
        raise InvalidArgument(LAST_NAME_EMPTY, field="last_name")
