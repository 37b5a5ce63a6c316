"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import EntityNotFoundError
from talardnad.domain.repositories.i_user_repository import IUserRepository
from talardnad.infrastructure.persistence.errors import translate_write_error
from talardnad.infrastructure.persistence.models import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Username and email uniqueness is backed by unique constraints. Writes
    commit before returning.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """
        Create and commit a new user.

        Args:
            user: User entity to create

        Returns:
            Created user entity

        Raises:
            DuplicateEntityError: If username or email is taken
        """
        model = UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        self.session.add(model)
        try:
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise translate_write_error(
                e,
                "User",
                {
                    "username": f"username '{user.username}'",
                    "email": f"email '{user.email}'",
                },
            ) from e
        await self.session.refresh(model)

        return self._to_entity(model)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update(self, user: User) -> User:
        """
        Update and commit an existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If user not found
            DuplicateEntityError: If new email is taken
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise EntityNotFoundError("User", str(user.id))

        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.updated_at = user.updated_at

        try:
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise translate_write_error(e, "User", f"email '{user.email}'") from e
        await self.session.refresh(model)

        return self._to_entity(model)

    async def delete(self, user_id: UUID) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_entity(self, model: UserModel) -> User:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: UserModel instance

        Returns:
            User entity
        """
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
