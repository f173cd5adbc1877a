"""
User gRPC Endpoints

UserV1 servicer. Converts protobuf messages to domain objects, calls the
service layer and translates domain errors to gRPC status codes.
"""
import logging
from typing import Any, Dict

import grpc
from google.protobuf import empty_pb2, json_format

from auth_api.modules.users.api import user_v1_pb2
from auth_api.modules.users.api.user_v1_pb2_grpc import UserV1Servicer
from auth_api.modules.users.domain.errors import (
    InternalError,
    InvalidArgumentError,
    UserServiceError,
)
from auth_api.modules.users.domain.user import NewUser, User, UserRole, UserUpdate
from auth_api.modules.users.services.user_service import UserService

logger = logging.getLogger("auth_api.users.api")

_SECRET_FIELDS = ("password", "passwordConfirm")

_STATUS_CODES = (
    (InvalidArgumentError, grpc.StatusCode.INVALID_ARGUMENT),
    (InternalError, grpc.StatusCode.INTERNAL),
)


def describe_request(request) -> Dict[str, Any]:
    """Request as a dict suitable for logs, with password fields masked."""
    data = json_format.MessageToDict(request)
    for field in _SECRET_FIELDS:
        if field in data:
            data[field] = "***"
    return data


def status_code_for(error: UserServiceError) -> grpc.StatusCode:
    for error_type, code in _STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return grpc.StatusCode.INTERNAL


def user_to_response(user: User) -> user_v1_pb2.GetUserInfoResponse:
    response = user_v1_pb2.GetUserInfoResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=int(user.role),
    )
    response.created_at.FromDatetime(user.created_at)
    if user.updated_at is not None:
        response.updated_at.FromDatetime(user.updated_at)
    return response


def new_user_from_request(request) -> NewUser:
    return NewUser(
        name=request.name,
        email=request.email,
        password=request.password,
        password_confirm=request.password_confirm,
        role=UserRole.parse(request.role),
    )


def user_update_from_request(request) -> UserUpdate:
    return UserUpdate(
        id=request.id,
        role=UserRole.parse(request.role),
        name=request.name.value if request.HasField("name") else None,
        email=request.email.value if request.HasField("email") else None,
    )


class UserV1Endpoints(UserV1Servicer):
    """gRPC handlers for user_v1.UserV1."""

    def __init__(self, service: UserService):
        self.service = service

    async def _abort(self, method: str, context, error: UserServiceError):
        code = status_code_for(error)
        logger.error(f"[UserV1.{method}] {code.name}: {error}")
        await context.abort(code, str(error))

    async def GetUserInfo(self, request, context):
        logger.info(f"[UserV1.GetUserInfo] input params: {describe_request(request)}")
        try:
            user = await self.service.get_user(request.id)
        except UserServiceError as e:
            await self._abort("GetUserInfo", context, e)
        return user_to_response(user)

    async def CreateUser(self, request, context):
        logger.info(f"[UserV1.CreateUser] input params: {describe_request(request)}")
        try:
            user_id = await self.service.create_user(new_user_from_request(request))
        except UserServiceError as e:
            await self._abort("CreateUser", context, e)
        return user_v1_pb2.CreateUserResponse(id=user_id)

    async def UpdateUser(self, request, context):
        logger.info(f"[UserV1.UpdateUser] input params: {describe_request(request)}")
        try:
            await self.service.update_user(user_update_from_request(request))
        except UserServiceError as e:
            await self._abort("UpdateUser", context, e)
        return empty_pb2.Empty()

    async def DeleteUser(self, request, context):
        logger.info(f"[UserV1.DeleteUser] input params: {describe_request(request)}")
        try:
            await self.service.delete_user(request.id)
        except UserServiceError as e:
            await self._abort("DeleteUser", context, e)
        return empty_pb2.Empty()
