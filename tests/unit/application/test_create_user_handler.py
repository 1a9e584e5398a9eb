"""Unit tests for CreateUserHandler."""

from unittest.mock import AsyncMock

import pytest

from civic_portal.application.users import CreateUserCommand, CreateUserError, CreateUserHandler
from civic_portal.domain.users import Email, User, UserRepository


@pytest.fixture
def user_repo():
    repo = AsyncMock(spec=UserRepository)
    repo.exists.return_value = False
    return repo


@pytest.fixture
def handler(user_repo):
    return CreateUserHandler(user_repo=user_repo)


class TestCreateUserHandler:
    """Tests for CreateUserHandler."""

    @pytest.mark.asyncio
    async def test_creates_user(self, handler, user_repo):
        # Act
        result = await handler.handle(
            CreateUserCommand(email="ada@example.org", name="  Ada Lovelace ")
        )

        # Assert
        assert result.success is True
        assert result.value.email == "ada@example.org"
        assert result.value.name == "Ada Lovelace"
        assert result.value.created_at == result.value.updated_at
        user_repo.exists.assert_awaited_once_with(Email("ada@example.org"))
        saved = user_repo.save.await_args.args[0]
        assert isinstance(saved, User)
        assert saved.id.value == result.value.id

    @pytest.mark.asyncio
    async def test_duplicate_email(self, handler, user_repo):
        user_repo.exists.return_value = True

        result = await handler.handle(CreateUserCommand(email="ada@example.org", name="Ada"))

        assert result.success is False
        assert result.error == CreateUserError.EMAIL_ALREADY_EXISTS
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["", "ada@", "ada..l@example.org", None])
    async def test_invalid_email(self, handler, user_repo, email):
        result = await handler.handle(CreateUserCommand(email=email, name="Ada"))

        assert result.error == CreateUserError.INVALID_EMAIL
        user_repo.exists.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 101, None])
    async def test_invalid_name(self, handler, user_repo, name):
        result = await handler.handle(CreateUserCommand(email="ada@example.org", name=name))

        assert result.success is False
        assert result.error == "INVALID_NAME"
        user_repo.exists.assert_not_awaited()
