"""
Request Validation

Rejects malformed requests before they reach storage. Each validator
returns a cleaned copy of its input or raises InvalidArgumentError.
"""
from typing import Optional

from auth_api.modules.users.domain.errors import InvalidArgumentError
from auth_api.modules.users.domain.user import NewUser, UserRole, UserUpdate

USER_ID_REQUIRED = "User-id must be provided"
EMPTY_NAME = "User name must not be empty"
EMPTY_EMAIL = "Email must not be empty"
INVALID_PASSWORD = "Password must not be empty. Password must be equal to Password_confirm"
INVALID_ROLE = "Invalid role"

KNOWN_ROLES = frozenset(role for role in UserRole if role is not UserRole.UNKNOWN)


def validate_user_id(user_id: int) -> int:
    if not user_id:
        raise InvalidArgumentError(USER_ID_REQUIRED)
    return user_id


def validate_role(role) -> UserRole:
    parsed = UserRole.parse(role)
    if parsed not in KNOWN_ROLES:
        raise InvalidArgumentError(INVALID_ROLE)
    return parsed


def _optional_trimmed(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def validate_new_user(new_user: NewUser) -> NewUser:
    """
    Validate a CreateUser request.

    Checks run in order and the first failure wins:
    name, email, password/confirmation, role.
    """
    name = (new_user.name or "").strip()
    if not name:
        raise InvalidArgumentError(EMPTY_NAME)

    email = (new_user.email or "").strip()
    if not email:
        raise InvalidArgumentError(EMPTY_EMAIL)

    password = new_user.password or ""
    if password != (new_user.password_confirm or "") or not password.strip():
        raise InvalidArgumentError(INVALID_PASSWORD)

    role = validate_role(new_user.role)

    return NewUser(
        name=name,
        email=email,
        password=password,
        password_confirm=new_user.password_confirm,
        role=role,
    )


def validate_user_update(user_update: UserUpdate) -> UserUpdate:
    """
    Validate an UpdateUser request.

    Blank name/email are dropped so they stay unchanged in storage.
    """
    role = validate_role(user_update.role)
    return UserUpdate(
        id=user_update.id,
        role=role,
        name=_optional_trimmed(user_update.name),
        email=_optional_trimmed(user_update.email),
    )
