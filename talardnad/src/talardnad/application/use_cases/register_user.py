"""
Register User use case.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import DuplicateEntityError, ValidationError
from talardnad.domain.repositories.i_user_repository import IUserRepository
from talardnad.domain.services.i_password_hasher import IPasswordHasher


@dataclass
class RegisterUserCommand:
    """Command to register a user."""

    username: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class RegisterUser:
    """
    Register a new user account.

    Business rules:
    - Username must be unique
    - Email must be unique
    - Only the password hash is stored
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        """
        Initialize use case with dependencies.

        Args:
            user_repository: Repository for user persistence
            password_hasher: Service for password hashing
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommand) -> User:
        """
        Execute user registration.

        Args:
            command: Registration details

        Returns:
            Created User entity

        Raises:
            DuplicateEntityError: If username or email is taken
            ValidationError: If user data is invalid
        """
        # 1. Reject duplicates
        if await self.user_repository.get_by_username(command.username):
            raise DuplicateEntityError("User", f"username '{command.username}'")

        if await self.user_repository.get_by_email(command.email):
            raise DuplicateEntityError("User", f"email '{command.email}'")

        # 2. Build entity with hashed password
        try:
            user = User(
                id=uuid4(),
                username=command.username,
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
            )
        except ValueError as e:
            raise ValidationError(field="user", reason=str(e)) from e

        # 3. Save
        return await self.user_repository.create(user)
