"""
User Domain Model

Pure data models representing the auth user entity and the write requests
that create or change it.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional


class UserRole(IntEnum):
    """Access tier. Stored as an int in the ``role`` column."""
    UNKNOWN = 0
    USER = 1
    ADMIN = 2

    @classmethod
    def parse(cls, value) -> "UserRole":
        """Map a raw value (int or name) to a role, UNKNOWN when unrecognised."""
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper(), cls.UNKNOWN)
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.UNKNOWN


@dataclass
class User:
    """User domain model."""
    id: int
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary (e.g., from database row)."""
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            role=UserRole.parse(data.get("role")),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )


@dataclass
class NewUser:
    """Fields accepted by CreateUser."""
    name: str
    email: str
    password: str = field(repr=False)
    password_confirm: str = field(repr=False)
    role: UserRole = UserRole.UNKNOWN


@dataclass
class UserUpdate:
    """Partial update. ``None`` name/email are left unchanged."""
    id: int
    role: UserRole
    name: Optional[str] = None
    email: Optional[str] = None
