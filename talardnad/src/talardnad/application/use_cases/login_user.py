"""
Login User use case.
"""

from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import InvalidCredentialsError
from talardnad.domain.repositories.i_user_repository import IUserRepository
from talardnad.domain.services.i_password_hasher import IPasswordHasher


class LoginUser:
    """
    Authenticate user by username and password.

    Business rules:
    - Unknown user and wrong password fail the same way
    - Returns user entity for token generation
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, username: str, password: str) -> User:
        """
        Execute login.

        Args:
            username: Login name
            password: Plain-text password

        Returns:
            Authenticated User entity

        Raises:
            InvalidCredentialsError: If credentials do not match
        """
        user = await self.user_repository.get_by_username(username)

        if user is None:
            raise InvalidCredentialsError()

        if not self.password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return user
