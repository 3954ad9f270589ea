"""
errorcost Exception Hierarchy

Custom exceptions for lookup and benchmark error handling.
"""
from __future__ import annotations

from typing import Any, Optional


class ErrorCostError(Exception):
    """Root of the errorcost exception tree.

    Attributes:
        message: The error text, also available as ``str(err)``.
        context: Structured fields the error was raised with, keyed
            by name (e.g. ``{"user_id": ""}``).
    """

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context else {}

    def __repr__(self) -> str:
        name = type(self).__name__
        if not self.context:
            return f"{name}({self.message!r})"
        return f"{name}({self.message!r}, context={self.context!r})"


class UserNotFoundError(ErrorCostError):
    """Raised when no user exists for the requested ID.

    Only ``UserService.get_user_or_raise`` raises this. The lookup miss
    that triggered it is chained as ``__cause__``.

    Attributes:
        user_id: The ID that was requested.
    """

    def __init__(
        self,
        user_id: str,
        *,
        message: Optional[str] = None,
    ) -> None:
        """Initialize UserNotFoundError.

        Args:
            user_id: Requested user identifier.
            message: Optional custom message.
        """
        self.user_id = user_id

        if message is None:
            message = f"User with ID '{user_id}' was not found"

        super().__init__(message, context={"user_id": user_id})

    @property
    def cause(self) -> Optional[BaseException]:
        """Underlying lookup miss, if one was chained."""
        return self.__cause__


class DuplicateUserError(ErrorCostError):
    """Raised when a store is built with two users sharing an ID.

    Attributes:
        user_id: The duplicated identifier.
    """

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"Duplicate user ID '{user_id}' in store",
            context={"user_id": user_id},
        )


class ConfigurationError(ErrorCostError):
    """Raised for invalid benchmark configuration.

    Attributes:
        key: Configuration key that is invalid (if any).
        value: The offending value (if any).
    """

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        value: Any = None,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Error message.
            key: Offending configuration key.
            value: Offending value.
        """
        self.key = key
        self.value = value

        context: dict[str, Any] = {}
        if key is not None:
            context["key"] = key
            context["value"] = value

        super().__init__(message, context=context)


__all__ = [
    "ErrorCostError",
    "UserNotFoundError",
    "DuplicateUserError",
    "ConfigurationError",
]
