"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, EmailStr, Field

from src.domain.user import User


class CreateUserRequest(BaseModel):
    """Request model for user registration."""

    first_name: str = Field(..., description="User's first name")
    last_name: str = Field(..., description="User's last name")
    email: EmailStr
    password: str = Field(..., description="User password")
    repeat_password: str = Field(..., description="Password confirmation")


class UserResponse(BaseModel):
    """Response model for a created user."""

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build the public view of a user (never includes the password hash)."""
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
