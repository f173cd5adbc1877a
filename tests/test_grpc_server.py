"""
End-to-end tests through a real grpc.aio server and UserV1Stub, backed by the
in-memory repository.
"""
import grpc
import pytest
from google.protobuf import wrappers_pb2

from auth_api.app import create_server
from auth_api.modules.users.api import user_v1_pb2
from auth_api.modules.users.api.user_v1_pb2_grpc import UserV1Stub


@pytest.fixture
async def stub(user_service):
    server = create_server(user_service)
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()
    channel = grpc.aio.insecure_channel(f"127.0.0.1:{port}")
    yield UserV1Stub(channel)
    await channel.close()
    await server.stop(None)


async def create_user(stub, **overrides) -> int:
    fields = {
        "name": "Jane",
        "email": "jane@example.com",
        "password": "secret",
        "password_confirm": "secret",
        "role": user_v1_pb2.USER,
    }
    fields.update(overrides)
    response = await stub.CreateUser(user_v1_pb2.CreateUserRequest(**fields))
    return response.id


@pytest.mark.asyncio
async def test_created_user_is_readable(stub):
    user_id = await create_user(stub)

    response = await stub.GetUserInfo(user_v1_pb2.GetUserInfoRequest(id=user_id))

    assert user_id > 0
    assert response.id == user_id
    assert response.name == "Jane"
    assert response.email == "jane@example.com"
    assert response.role == user_v1_pb2.USER
    assert response.HasField("created_at")
    assert not response.HasField("updated_at")


@pytest.mark.asyncio
async def test_update_with_only_email(stub):
    user_id = await create_user(stub)
    request = user_v1_pb2.UpdateUserRequest(id=user_id, role=user_v1_pb2.ADMIN)
    request.email.CopyFrom(wrappers_pb2.StringValue(value="new@example.com"))

    await stub.UpdateUser(request)
    response = await stub.GetUserInfo(user_v1_pb2.GetUserInfoRequest(id=user_id))

    assert response.name == "Jane"
    assert response.email == "new@example.com"
    assert response.role == user_v1_pb2.ADMIN
    assert response.HasField("updated_at")


@pytest.mark.asyncio
async def test_create_with_mismatched_password(stub):
    with pytest.raises(grpc.aio.AioRpcError) as exc_info:
        await create_user(stub, password_confirm="different")

    assert exc_info.value.code() == grpc.StatusCode.INVALID_ARGUMENT


@pytest.mark.asyncio
async def test_get_with_zero_id(stub):
    with pytest.raises(grpc.aio.AioRpcError) as exc_info:
        await stub.GetUserInfo(user_v1_pb2.GetUserInfoRequest(id=0))

    assert exc_info.value.code() == grpc.StatusCode.INVALID_ARGUMENT
    assert exc_info.value.details() == "User-id must be provided"


@pytest.mark.asyncio
async def test_deleted_user_read_is_internal(stub):
    user_id = await create_user(stub)

    await stub.DeleteUser(user_v1_pb2.DeleteUserRequest(id=user_id))

    with pytest.raises(grpc.aio.AioRpcError) as exc_info:
        await stub.GetUserInfo(user_v1_pb2.GetUserInfoRequest(id=user_id))
    assert exc_info.value.code() == grpc.StatusCode.INTERNAL
