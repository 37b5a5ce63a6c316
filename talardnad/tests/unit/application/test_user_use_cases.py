"""
Unit tests for user use cases.

Tests registration, login and profile management against mocked
repositories.

Usage:
    pytest talardnad/tests/unit/application/test_user_use_cases.py
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from shared.tests import ComponentTest
from talardnad.application.use_cases.login_user import LoginUser
from talardnad.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from talardnad.application.use_cases.user_profile import (
    DeleteUser,
    DeleteUserCommand,
    GetUserProfile,
    GetUserProfileCommand,
    UpdateUserProfile,
    UpdateUserProfileCommand,
)
from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorKind,
    ForbiddenError,
    InvalidCredentialsError,
    ValidationError,
)


class TestUserUseCases(ComponentTest):
    """Unit tests for user registration, login and profile."""

    component_name = "talardnad"
    test_category = "unit"

    def setup_test(self):
        self.user_repo = AsyncMock()
        self.user_repo.get_by_username.return_value = None
        self.user_repo.get_by_email.return_value = None
        self.user_repo.create.side_effect = lambda user: user
        self.user_repo.update.side_effect = lambda user: user

        self.hasher = MagicMock()
        self.hasher.hash.side_effect = lambda password: f"hashed:{password}"
        self.hasher.verify.side_effect = (
            lambda password, password_hash: password_hash == f"hashed:{password}"
        )

        self.user = User(
            username="somchai",
            email="somchai@example.com",
            password_hash="hashed:s3cret-pass",
        )

    # ============================================================
    # RegisterUser
    # ============================================================

    async def test_register_stores_hash_not_password(self):
        """Test registration hashes the password."""
        self.reporter.info("Testing registration", context="Test")

        use_case = RegisterUser(self.user_repo, self.hasher)
        user = await use_case.execute(
            RegisterUserCommand(
                username="malee",
                email="malee@example.com",
                password="s3cret-pass",
                first_name="Malee",
            )
        )

        assert user.username == "malee"
        assert user.first_name == "Malee"
        assert user.password_hash == "hashed:s3cret-pass"
        self.user_repo.create.assert_awaited_once()

        self.reporter.info("User registered", context="Test")

    async def test_register_duplicate_username(self):
        """Test taken username is CONFLICT."""
        self.user_repo.get_by_username.return_value = self.user

        use_case = RegisterUser(self.user_repo, self.hasher)
        with pytest.raises(DuplicateEntityError) as exc_info:
            await use_case.execute(
                RegisterUserCommand(
                    username="somchai",
                    email="other@example.com",
                    password="s3cret-pass",
                )
            )

        assert exc_info.value.kind == ErrorKind.CONFLICT
        assert "username" in exc_info.value.message
        self.user_repo.create.assert_not_awaited()

    async def test_register_duplicate_email(self):
        """Test taken email is CONFLICT."""
        self.user_repo.get_by_email.return_value = self.user

        use_case = RegisterUser(self.user_repo, self.hasher)
        with pytest.raises(DuplicateEntityError) as exc_info:
            await use_case.execute(
                RegisterUserCommand(
                    username="newname",
                    email="somchai@example.com",
                    password="s3cret-pass",
                )
            )

        assert "email" in exc_info.value.message
        self.user_repo.create.assert_not_awaited()

    async def test_register_invalid_email_is_validation_error(self):
        """Test entity rules surface as VALIDATION."""
        use_case = RegisterUser(self.user_repo, self.hasher)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                RegisterUserCommand(
                    username="malee",
                    email="not-an-email",
                    password="s3cret-pass",
                )
            )

        assert exc_info.value.kind == ErrorKind.VALIDATION

    # ============================================================
    # LoginUser
    # ============================================================

    async def test_login_success(self):
        """Test correct credentials return the user."""
        self.reporter.info("Testing login", context="Test")

        self.user_repo.get_by_username.return_value = self.user
        use_case = LoginUser(self.user_repo, self.hasher)

        user = await use_case.execute("somchai", "s3cret-pass")

        assert user is self.user

    async def test_login_wrong_password(self):
        """Test wrong password is UNAUTHORIZED."""
        self.user_repo.get_by_username.return_value = self.user
        use_case = LoginUser(self.user_repo, self.hasher)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await use_case.execute("somchai", "wrong-pass")

        assert exc_info.value.kind == ErrorKind.UNAUTHORIZED

    async def test_login_unknown_user_same_error(self):
        """Test unknown user fails like a wrong password."""
        use_case = LoginUser(self.user_repo, self.hasher)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await use_case.execute("ghost", "s3cret-pass")

        assert exc_info.value.message == "Invalid username or password"
        self.hasher.verify.assert_not_called()

    # ============================================================
    # Profile
    # ============================================================

    async def test_get_profile_not_found(self):
        """Test missing user is NOT_FOUND."""
        self.user_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await GetUserProfile(self.user_repo).execute(
                GetUserProfileCommand(user_id=uuid4())
            )

    async def test_update_profile_changes_given_fields_only(self):
        """Test None fields are left untouched."""
        self.reporter.info("Testing profile update", context="Test")

        self.user.last_name = "Jaidee"
        self.user_repo.get_by_id.return_value = self.user

        updated = await UpdateUserProfile(self.user_repo).execute(
            UpdateUserProfileCommand(user_id=self.user.id, first_name="Som")
        )

        assert updated.first_name == "Som"
        assert updated.last_name == "Jaidee"
        assert updated.email == "somchai@example.com"
        self.user_repo.get_by_email.assert_not_awaited()

    async def test_update_profile_email_taken(self):
        """Test moving to another user's email is CONFLICT."""
        self.user_repo.get_by_id.return_value = self.user
        self.user_repo.get_by_email.return_value = User(
            username="malee", email="malee@example.com"
        )

        with pytest.raises(DuplicateEntityError):
            await UpdateUserProfile(self.user_repo).execute(
                UpdateUserProfileCommand(
                    user_id=self.user.id, email="malee@example.com"
                )
            )

        self.user_repo.update.assert_not_awaited()

    async def test_update_profile_invalid_email(self):
        """Test malformed email is VALIDATION."""
        self.user_repo.get_by_id.return_value = self.user

        with pytest.raises(ValidationError):
            await UpdateUserProfile(self.user_repo).execute(
                UpdateUserProfileCommand(user_id=self.user.id, email="broken")
            )

    async def test_delete_other_user_forbidden(self):
        """Test users cannot delete someone else."""
        with pytest.raises(ForbiddenError) as exc_info:
            await DeleteUser(self.user_repo).execute(
                DeleteUserCommand(user_id=uuid4(), requester_id=uuid4())
            )

        assert exc_info.value.kind == ErrorKind.FORBIDDEN
        self.user_repo.delete.assert_not_awaited()

    async def test_delete_missing_user(self):
        """Test deleting an absent account is NOT_FOUND."""
        user_id = uuid4()
        self.user_repo.delete.return_value = False

        with pytest.raises(EntityNotFoundError):
            await DeleteUser(self.user_repo).execute(
                DeleteUserCommand(user_id=user_id, requester_id=user_id)
            )

    async def test_delete_own_account(self):
        """Test users can delete themselves."""
        self.user_repo.delete.return_value = True

        await DeleteUser(self.user_repo).execute(
            DeleteUserCommand(user_id=self.user.id, requester_id=self.user.id)
        )

        self.user_repo.delete.assert_awaited_once_with(self.user.id)


if __name__ == "__main__":
    TestUserUseCases.run_as_main()
