"""
Tests for UserService orchestration.
"""
from unittest.mock import AsyncMock

import pytest

from auth_api.modules.users.domain.errors import InternalError, InvalidArgumentError
from auth_api.modules.users.domain.user import NewUser, UserRole, UserUpdate
from auth_api.modules.users.services.user_service import UserService


@pytest.fixture
def mock_repository():
    repository = AsyncMock()
    repository.create.return_value = 1
    return repository


def make_new_user(**overrides) -> NewUser:
    fields = {
        "name": " Jane ",
        "email": "jane@example.com",
        "password": "secret",
        "password_confirm": "secret",
        "role": UserRole.USER,
    }
    fields.update(overrides)
    return NewUser(**fields)


@pytest.mark.asyncio
async def test_invalid_create_never_reaches_repository(mock_repository):
    service = UserService(mock_repository)

    with pytest.raises(InvalidArgumentError):
        await service.create_user(make_new_user(password_confirm="other"))

    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_passes_validated_user(mock_repository):
    service = UserService(mock_repository)

    user_id = await service.create_user(make_new_user())

    assert user_id == 1
    (validated,), _ = mock_repository.create.call_args
    assert validated.name == "Jane"


@pytest.mark.asyncio
async def test_get_with_zero_id_rejected(mock_repository):
    service = UserService(mock_repository)

    with pytest.raises(InvalidArgumentError):
        await service.get_user(0)

    mock_repository.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_with_zero_id_rejected(mock_repository):
    service = UserService(mock_repository)

    with pytest.raises(InvalidArgumentError):
        await service.delete_user(0)

    mock_repository.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_repository_errors_propagate(mock_repository):
    mock_repository.delete.side_effect = InternalError("Unable to execute SQL query")
    service = UserService(mock_repository)

    with pytest.raises(InternalError):
        await service.delete_user(4)


@pytest.mark.asyncio
async def test_created_user_is_readable(user_service):
    user_id = await user_service.create_user(make_new_user())

    user = await user_service.get_user(user_id)

    assert user_id > 0
    assert user.name == "Jane"
    assert user.email == "jane@example.com"
    assert user.role is UserRole.USER
    assert user.updated_at is None


@pytest.mark.asyncio
async def test_update_with_only_email_keeps_name(user_service):
    user_id = await user_service.create_user(make_new_user())

    await user_service.update_user(
        UserUpdate(id=user_id, role=UserRole.ADMIN, email="new@example.com")
    )
    user = await user_service.get_user(user_id)

    assert user.name == "Jane"
    assert user.email == "new@example.com"
    assert user.role is UserRole.ADMIN
    assert user.updated_at is not None


@pytest.mark.asyncio
async def test_update_with_unknown_role_rejected(user_service, memory_repository):
    user_id = await user_service.create_user(make_new_user())

    with pytest.raises(InvalidArgumentError):
        await user_service.update_user(UserUpdate(id=user_id, role=UserRole.UNKNOWN, name="X"))

    assert memory_repository.rows[user_id]["name"] == "Jane"


@pytest.mark.asyncio
async def test_deleted_user_is_gone(user_service):
    user_id = await user_service.create_user(make_new_user())

    await user_service.delete_user(user_id)

    with pytest.raises(InternalError):
        await user_service.get_user(user_id)


@pytest.mark.asyncio
async def test_list_users(user_service):
    for name in ("A", "B", "C"):
        await user_service.create_user(make_new_user(name=name))

    users = await user_service.list_users(limit=2)

    assert [user.name for user in users] == ["A", "B"]


@pytest.mark.asyncio
async def test_update_cleans_fields_before_repository(mock_repository):
    service = UserService(mock_repository)

    await service.update_user(UserUpdate(id=4, role=UserRole.USER, name="   ", email=" new@example.com "))

    (cleaned,), _ = mock_repository.update.call_args
    assert cleaned.name is None
    assert cleaned.email == "new@example.com"
