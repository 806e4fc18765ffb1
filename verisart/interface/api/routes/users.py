"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, EmailStr, Field

from verisart.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserCertificatesRequest,
    GetUserCertificatesResponse,
    GetUserCertificatesUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for creating a user."""

    email: EmailStr
    name: str = Field(min_length=1, max_length=255)


@router.get("/", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List every user.

    Returns:
        All users, in no particular order
    """
    return await list_users_use_case.execute()


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Register a user.

    Args:
        request: Email and display name
        create_user_use_case: Create user use case from DI

    Returns:
        The created user; its id is derived from the email

    Example:
        POST /users/

        Request:
        {"email": "bob@table.com", "name": "Bob"}

        Response:
        {"id": "5f0c...", "email": "bob@table.com", "name": "Bob"}
    """
    return await create_user_use_case.execute(
        CreateUserRequest(email=request.email, name=request.name)
    )


@router.get("/{user_id}/certificates/", response_model=GetUserCertificatesResponse)
async def get_user_certificates(
    user_id: str,
    get_user_certificates_use_case: FromDishka[GetUserCertificatesUseCase],
) -> GetUserCertificatesResponse:
    """List the certificates a user owns.

    Args:
        user_id: Owner's user ID
        get_user_certificates_use_case: Get user certificates use case from DI

    Returns:
        The user's certificates (empty for unknown users)
    """
    return await get_user_certificates_use_case.execute(
        GetUserCertificatesRequest(user_id=user_id)
    )
