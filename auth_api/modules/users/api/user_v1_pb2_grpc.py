"""
user_v1 gRPC service bindings

Client stub, servicer base class and server registration for
``user_v1.UserV1``, in the shape of ``grpc_tools.protoc`` output.
"""
import grpc
from google.protobuf import empty_pb2

from auth_api.modules.users.api import user_v1_pb2

SERVICE_NAME = user_v1_pb2.SERVICE_NAME


def _method_path(method: str) -> str:
    return f"/{SERVICE_NAME}/{method}"


class UserV1Stub:
    """Client stub for the UserV1 service."""

    def __init__(self, channel):
        self.GetUserInfo = channel.unary_unary(
            _method_path("GetUserInfo"),
            request_serializer=user_v1_pb2.GetUserInfoRequest.SerializeToString,
            response_deserializer=user_v1_pb2.GetUserInfoResponse.FromString,
        )
        self.CreateUser = channel.unary_unary(
            _method_path("CreateUser"),
            request_serializer=user_v1_pb2.CreateUserRequest.SerializeToString,
            response_deserializer=user_v1_pb2.CreateUserResponse.FromString,
        )
        self.UpdateUser = channel.unary_unary(
            _method_path("UpdateUser"),
            request_serializer=user_v1_pb2.UpdateUserRequest.SerializeToString,
            response_deserializer=empty_pb2.Empty.FromString,
        )
        self.DeleteUser = channel.unary_unary(
            _method_path("DeleteUser"),
            request_serializer=user_v1_pb2.DeleteUserRequest.SerializeToString,
            response_deserializer=empty_pb2.Empty.FromString,
        )


class UserV1Servicer:
    """Base servicer; every method answers UNIMPLEMENTED."""

    async def GetUserInfo(self, request, context):
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "Method not implemented!")

    async def CreateUser(self, request, context):
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "Method not implemented!")

    async def UpdateUser(self, request, context):
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "Method not implemented!")

    async def DeleteUser(self, request, context):
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "Method not implemented!")


def add_UserV1Servicer_to_server(servicer, server):
    rpc_method_handlers = {
        "GetUserInfo": grpc.unary_unary_rpc_method_handler(
            servicer.GetUserInfo,
            request_deserializer=user_v1_pb2.GetUserInfoRequest.FromString,
            response_serializer=user_v1_pb2.GetUserInfoResponse.SerializeToString,
        ),
        "CreateUser": grpc.unary_unary_rpc_method_handler(
            servicer.CreateUser,
            request_deserializer=user_v1_pb2.CreateUserRequest.FromString,
            response_serializer=user_v1_pb2.CreateUserResponse.SerializeToString,
        ),
        "UpdateUser": grpc.unary_unary_rpc_method_handler(
            servicer.UpdateUser,
            request_deserializer=user_v1_pb2.UpdateUserRequest.FromString,
            response_serializer=empty_pb2.Empty.SerializeToString,
        ),
        "DeleteUser": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteUser,
            request_deserializer=user_v1_pb2.DeleteUserRequest.FromString,
            response_serializer=empty_pb2.Empty.SerializeToString,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(SERVICE_NAME, rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
