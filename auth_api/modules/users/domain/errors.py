"""
User Domain Errors

Two kinds only: client-correctable validation failures and internal
query build/execution failures.
"""


class UserServiceError(Exception):
    """Base class for errors raised by the users module."""


class InvalidArgumentError(UserServiceError):
    """Request failed validation before touching storage."""


class InternalError(UserServiceError):
    """Query construction or execution failed."""
