"""
errorcost Data Models

Value types returned by the lookup service.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional


@dataclass(frozen=True, slots=True)
class User:
    """A user record held by the store.

    Immutable (frozen) so the store stays read-only after construction.

    Attributes:
        id: Unique user identifier.
        name: Display name.
    """

    id: str
    name: str


class TryGetResult(NamedTuple):
    """Outcome of a try-get lookup.

    Unpacks as ``found, user = service.try_get_user(user_id)``.
    """

    found: bool
    user: Optional[User]


__all__ = [
    "User",
    "TryGetResult",
]
