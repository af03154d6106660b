"""
API v1 routes.

Defines REST endpoints for the User Registration API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_user_service
from src.api.models import CreateUserRequest, ErrorResponse, UserResponse
from src.domain.exceptions import InvalidArgument, UserServiceException
from src.domain.user_service import UserService

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid registration data"},
        503: {"model": ErrorResponse, "description": "User registration failed"},
    },
    summary="Create a new user",
    description="Submit profile fields and password confirmation to register a user. "
    "An email confirmation is scheduled before the response is returned.",
)
async def create_user(
    request_data: CreateUserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Register a new user and schedule email confirmation.

    - **first_name** / **last_name**: must not be blank
    - **email**: Valid email address
    - **password** / **repeat_password**: Password and its confirmation
    """
    try:
        user = service.create_user(
            request_data.first_name,
            request_data.last_name,
            request_data.email,
            request_data.password,
            request_data.repeat_password,
        )
    except InvalidArgument as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from None
    except UserServiceException:
        # Cause is logged by the domain; clients get a generic message
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User registration failed",
        ) from None
    return UserResponse.from_user(user)
