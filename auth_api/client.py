"""
Auth API client

Command-line client issuing a single user_v1.UserV1 call and printing the
response as JSON.
"""
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

import grpc
from google.protobuf import json_format, wrappers_pb2

from auth_api.modules.users.api import user_v1_pb2
from auth_api.modules.users.api.user_v1_pb2_grpc import UserV1Stub

DEFAULT_ADDRESS = "localhost:50051"
ROLE_NAMES = ("USER", "ADMIN")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="user_v1.UserV1 client")
    parser.add_argument("--address", default=DEFAULT_ADDRESS, help="server host:port")
    parser.add_argument("--timeout", type=float, default=10.0, help="call deadline in seconds")
    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="GetUserInfo")
    get.add_argument("id", type=int)

    create = commands.add_parser("create", help="CreateUser")
    create.add_argument("--name", required=True)
    create.add_argument("--email", required=True)
    create.add_argument("--password", required=True)
    create.add_argument("--password-confirm", required=True)
    create.add_argument("--role", choices=ROLE_NAMES, default="USER")

    update = commands.add_parser("update", help="UpdateUser")
    update.add_argument("id", type=int)
    update.add_argument("--name")
    update.add_argument("--email")
    update.add_argument("--role", choices=ROLE_NAMES, required=True)

    delete = commands.add_parser("delete", help="DeleteUser")
    delete.add_argument("id", type=int)

    return parser


def build_request(args: argparse.Namespace):
    """Map parsed arguments to (stub method name, request message)."""
    if args.command == "get":
        return "GetUserInfo", user_v1_pb2.GetUserInfoRequest(id=args.id)

    if args.command == "create":
        return "CreateUser", user_v1_pb2.CreateUserRequest(
            name=args.name,
            email=args.email,
            password=args.password,
            password_confirm=args.password_confirm,
            role=user_v1_pb2.UserRole.Value(args.role),
        )

    if args.command == "update":
        request = user_v1_pb2.UpdateUserRequest(
            id=args.id,
            role=user_v1_pb2.UserRole.Value(args.role),
        )
        if args.name is not None:
            request.name.CopyFrom(wrappers_pb2.StringValue(value=args.name))
        if args.email is not None:
            request.email.CopyFrom(wrappers_pb2.StringValue(value=args.email))
        return "UpdateUser", request

    if args.command == "delete":
        return "DeleteUser", user_v1_pb2.DeleteUserRequest(id=args.id)

    raise ValueError(f"Unknown command: {args.command}")


async def run(args: argparse.Namespace, stub: Optional[UserV1Stub] = None) -> int:
    method, request = build_request(args)

    async with grpc.aio.insecure_channel(args.address) as channel:
        stub = stub or UserV1Stub(channel)
        try:
            response = await getattr(stub, method)(request, timeout=args.timeout)
        except grpc.aio.AioRpcError as e:
            print(f"{method} failed: {e.code().name}: {e.details()}", file=sys.stderr)
            return 1

    print(json_format.MessageToJson(response, preserving_proto_field_name=True))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING)
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
