"""
user_v1 protobuf messages

Builds the descriptors for ``proto/user_v1/user.proto`` at import time and
registers them in the default descriptor pool, so server reflection and
``json_format`` see the same types as the wire.
"""
from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool
from google.protobuf import empty_pb2  # noqa: F401 - registers google/protobuf/empty.proto
from google.protobuf import message_factory
from google.protobuf import timestamp_pb2  # noqa: F401 - registers google/protobuf/timestamp.proto
from google.protobuf import wrappers_pb2  # noqa: F401 - registers google/protobuf/wrappers.proto
from google.protobuf.internal import enum_type_wrapper

PACKAGE = "user_v1"
SERVICE_NAME = f"{PACKAGE}.UserV1"

_Field = descriptor_pb2.FieldDescriptorProto

_SCALAR = {
    "int64": _Field.TYPE_INT64,
    "string": _Field.TYPE_STRING,
}

# (name, type, number); non-scalar types are fully qualified names.
_MESSAGES = {
    "GetUserInfoRequest": [
        ("id", "int64", 1),
    ],
    "GetUserInfoResponse": [
        ("id", "int64", 1),
        ("name", "string", 2),
        ("email", "string", 3),
        ("role", ".user_v1.UserRole", 4),
        ("created_at", ".google.protobuf.Timestamp", 5),
        ("updated_at", ".google.protobuf.Timestamp", 6),
    ],
    "CreateUserRequest": [
        ("name", "string", 1),
        ("email", "string", 2),
        ("password", "string", 3),
        ("password_confirm", "string", 4),
        ("role", ".user_v1.UserRole", 5),
    ],
    "CreateUserResponse": [
        ("id", "int64", 1),
    ],
    "UpdateUserRequest": [
        ("id", "int64", 1),
        ("name", ".google.protobuf.StringValue", 2),
        ("email", ".google.protobuf.StringValue", 3),
        ("role", ".user_v1.UserRole", 4),
    ],
    "DeleteUserRequest": [
        ("id", "int64", 1),
    ],
}

_ENUMS = {
    "UserRole": [("UNKNOWN", 0), ("USER", 1), ("ADMIN", 2)],
}

# (method, input, output)
_METHODS = [
    ("GetUserInfo", ".user_v1.GetUserInfoRequest", ".user_v1.GetUserInfoResponse"),
    ("CreateUser", ".user_v1.CreateUserRequest", ".user_v1.CreateUserResponse"),
    ("UpdateUser", ".user_v1.UpdateUserRequest", ".google.protobuf.Empty"),
    ("DeleteUser", ".user_v1.DeleteUserRequest", ".google.protobuf.Empty"),
]


def _snake_to_json(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)


def build_file_descriptor_proto() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="user_v1/user.proto",
        package=PACKAGE,
        syntax="proto3",
        dependency=[
            "google/protobuf/empty.proto",
            "google/protobuf/timestamp.proto",
            "google/protobuf/wrappers.proto",
        ],
    )

    for enum_name, values in _ENUMS.items():
        enum_proto = file_proto.enum_type.add(name=enum_name)
        for value_name, number in values:
            enum_proto.value.add(name=value_name, number=number)

    for message_name, fields in _MESSAGES.items():
        message_proto = file_proto.message_type.add(name=message_name)
        for field_name, field_type, number in fields:
            field = message_proto.field.add(
                name=field_name,
                number=number,
                label=_Field.LABEL_OPTIONAL,
                json_name=_snake_to_json(field_name),
            )
            if field_type in _SCALAR:
                field.type = _SCALAR[field_type]
            elif field_type.rsplit(".", 1)[-1] in _ENUMS:
                field.type = _Field.TYPE_ENUM
                field.type_name = field_type
            else:
                field.type = _Field.TYPE_MESSAGE
                field.type_name = field_type

    service_proto = file_proto.service.add(name="UserV1")
    for method_name, input_type, output_type in _METHODS:
        service_proto.method.add(name=method_name, input_type=input_type, output_type=output_type)

    return file_proto


DESCRIPTOR = descriptor_pool.Default().AddSerializedFile(
    build_file_descriptor_proto().SerializeToString()
)

UserRole = enum_type_wrapper.EnumTypeWrapper(DESCRIPTOR.enum_types_by_name["UserRole"])
UNKNOWN = UserRole.Value("UNKNOWN")
USER = UserRole.Value("USER")
ADMIN = UserRole.Value("ADMIN")

GetUserInfoRequest = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["GetUserInfoRequest"])
GetUserInfoResponse = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["GetUserInfoResponse"])
CreateUserRequest = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["CreateUserRequest"])
CreateUserResponse = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["CreateUserResponse"])
UpdateUserRequest = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["UpdateUserRequest"])
DeleteUserRequest = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["DeleteUserRequest"])
