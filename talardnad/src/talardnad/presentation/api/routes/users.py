"""
User API routes.

- GET /users/me - Current authenticated user
- GET /users/{user_id} - User profile
- PATCH /users/{user_id} - Update own profile
- DELETE /users/{user_id} - Delete own account
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from talardnad.application.use_cases.user_profile import (
    DeleteUser,
    DeleteUserCommand,
    GetUserProfile,
    GetUserProfileCommand,
    UpdateUserProfile,
    UpdateUserProfileCommand,
)
from talardnad.di.dependencies import (
    get_delete_user,
    get_get_user_profile,
    get_update_user_profile,
)
from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import ForbiddenError
from talardnad.presentation.api.middleware.auth import get_current_user
from talardnad.presentation.schemas.user_schemas import (
    UpdateUserRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user profile",
)
async def get_me(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """Get authenticated user's profile."""
    return UserResponse.from_entity(current_user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user profile",
)
async def get_user(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: GetUserProfile = Depends(get_get_user_profile),
) -> UserResponse:
    """
    Get user profile by ID.

    Errors:
    - 404 if user not found
    """
    user = await use_case.execute(GetUserProfileCommand(user_id=user_id))
    return UserResponse.from_entity(user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user profile",
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateUserProfile = Depends(get_update_user_profile),
) -> UserResponse:
    """
    Update own profile.

    Errors:
    - 403 if updating another user
    - 400 if new email is taken
    """
    if current_user.id != user_id:
        raise ForbiddenError("You are not authorized to update this user")

    user = await use_case.execute(
        UpdateUserProfileCommand(
            user_id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
        )
    )
    return UserResponse.from_entity(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user account",
)
async def delete_user(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: DeleteUser = Depends(get_delete_user),
) -> Response:
    """
    Delete own account.

    Errors:
    - 403 if deleting another user
    - 404 if user not found
    """
    await use_case.execute(
        DeleteUserCommand(user_id=user_id, requester_id=current_user.id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
