"""
User Lookup Service

A fixed, read-only user store with three equivalent ways to fetch a
user by ID. The three differ only in how a missing user is signaled:

- get_user_or_raise(): raises UserNotFoundError
- get_user_or_default(): returns None
- try_get_user(): returns TryGetResult(found=False, user=None)

All three go through the same single store probe, so timing them
against each other isolates the cost of the signaling mechanism.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from errorcost.exceptions import DuplicateUserError, UserNotFoundError
from errorcost.models import TryGetResult, User

logger = logging.getLogger(__name__)

# Seed entry for benchmark runs. Benchmarks always request the empty
# string, which is never a key here.
BENCHMARK_USER_ID = "some-user-who-will-never-be-fetched"
BENCHMARK_USER_NAME = "User!"


class UserService:
    """Read-only user store.

    The store is populated once at construction and never mutated
    afterwards, so instances are safe to share across threads.

    Example:
        ```python
        service = UserService([User(id="some-user", name="User!")])

        service.get_user_or_raise("some-user")     # User(...)
        service.get_user_or_default("missing")     # None
        found, user = service.try_get_user("")     # (False, None)
        ```
    """

    __slots__ = ("_users",)

    def __init__(self, users: Iterable[User] = ()) -> None:
        """Initialize the store.

        Args:
            users: Users to store, keyed by their ``id``.

        Raises:
            DuplicateUserError: If two users share an ID.
        """
        store: dict[str, User] = {}
        for user in users:
            if user.id in store:
                raise DuplicateUserError(user.id)
            store[user.id] = user

        self._users = store
        logger.debug("Created user service with %d users", len(store))

    @classmethod
    def create_for_benchmark(cls) -> "UserService":
        """Create the service used by the benchmark cases.

        Returns:
            Service holding a single user that benchmarks never request.
        """
        return cls([User(id=BENCHMARK_USER_ID, name=BENCHMARK_USER_NAME)])

    @property
    def users(self) -> Mapping[str, User]:
        """Read-only view of the store."""
        return MappingProxyType(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __iter__(self) -> Iterator[str]:
        return iter(self._users)

    def _lookup(self, user_id: str) -> Optional[User]:
        # Single hash probe shared by every fetch variant.
        return self._users.get(user_id)

    def get_user_or_raise(self, user_id: str) -> User:
        """Fetch the user with the given ID.

        Args:
            user_id: ID of the user to fetch.

        Returns:
            The user with the given ID.

        Raises:
            UserNotFoundError: If no user with the given ID exists. The
                lookup miss is chained as the exception's cause.
        """
        user = self._lookup(user_id)
        if user is None:
            raise UserNotFoundError(user_id) from KeyError(user_id)
        return user

    def get_user_or_default(self, user_id: str) -> Optional[User]:
        """Fetch the user with the given ID, or None if absent.

        Args:
            user_id: ID of the user to fetch.

        Returns:
            The user with the given ID, or None.
        """
        return self._lookup(user_id)

    def try_get_user(self, user_id: str) -> TryGetResult:
        """Fetch the user with the given ID along with a found flag.

        Args:
            user_id: ID of the user to fetch.

        Returns:
            ``TryGetResult(True, user)`` if found, else
            ``TryGetResult(False, None)``.
        """
        user = self._lookup(user_id)
        return TryGetResult(user is not None, user)

    def __repr__(self) -> str:
        return f"UserService(users={len(self._users)})"


__all__ = [
    "BENCHMARK_USER_ID",
    "BENCHMARK_USER_NAME",
    "UserService",
]
