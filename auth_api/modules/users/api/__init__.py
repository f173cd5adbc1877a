"""
gRPC API

user_v1 messages, service bindings and the UserV1 servicer.
"""

from .user_v1_pb2 import SERVICE_NAME
from .user_v1_pb2_grpc import UserV1Stub, add_UserV1Servicer_to_server
from .user_endpoints import UserV1Endpoints

__all__ = [
    "SERVICE_NAME",
    "UserV1Stub",
    "add_UserV1Servicer_to_server",
    "UserV1Endpoints",
]
