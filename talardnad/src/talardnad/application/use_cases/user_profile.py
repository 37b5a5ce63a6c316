"""
User profile use cases.

Handles profile reads, updates and account deletion.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)
from talardnad.domain.repositories.i_user_repository import IUserRepository


@dataclass
class GetUserProfileCommand:
    """Command to get user profile."""

    user_id: UUID


@dataclass
class UpdateUserProfileCommand:
    """Command to update user profile."""

    user_id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class DeleteUserCommand:
    """Command to delete a user account."""

    user_id: UUID
    requester_id: UUID


class GetUserProfile:
    """Use case for reading a user profile."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, command: GetUserProfileCommand) -> User:
        """
        Get user profile.

        Raises:
            EntityNotFoundError: If user not found
        """
        user = await self.user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError("User", str(command.user_id))
        return user


class UpdateUserProfile:
    """
    Use case for updating user profile.

    Updates user's names and email.
    """

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def execute(self, command: UpdateUserProfileCommand) -> User:
        """
        Update user profile.

        Args:
            command: Command with updated fields

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If user not found
            DuplicateEntityError: If new email belongs to another user
        """
        user = await self.user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError("User", str(command.user_id))

        if command.email is not None and command.email != user.email:
            other = await self.user_repository.get_by_email(command.email)
            if other is not None and other.id != user.id:
                raise DuplicateEntityError("User", f"email '{command.email}'")

        try:
            user.update_profile(
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
            )
        except ValueError as e:
            raise ValidationError(field="email", reason=str(e)) from e

        return await self.user_repository.update(user)


class DeleteUser:
    """
    Use case for deleting a user account.

    Business rules:
    - Users may only delete their own account
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, command: DeleteUserCommand) -> None:
        """
        Delete user.

        Raises:
            ForbiddenError: If requester is not the user
            EntityNotFoundError: If user not found
        """
        if command.requester_id != command.user_id:
            raise ForbiddenError("You are not authorized to delete this user")

        deleted = await self.user_repository.delete(command.user_id)
        if not deleted:
            raise EntityNotFoundError("User", str(command.user_id))
