"""Tests for the user lookup service."""
from __future__ import annotations

import pytest

from errorcost.exceptions import DuplicateUserError, UserNotFoundError
from errorcost.models import TryGetResult, User
from errorcost.service import BENCHMARK_USER_ID, UserService

ABSENT_IDS = ["", "nonexistent-xyz", "SOME-USER", " some-user", "some-user\x00", "üser"]


class TestPresentUser:
    """All three variants return the stored user."""

    def test_get_user_or_raise(self, service: UserService, some_user: User) -> None:
        assert service.get_user_or_raise("some-user") == User(id="some-user", name="User!")
        assert service.get_user_or_raise("some-user") is some_user

    def test_get_user_or_default(self, service: UserService, some_user: User) -> None:
        assert service.get_user_or_default("some-user") == some_user

    def test_try_get_user(self, service: UserService, some_user: User) -> None:
        result = service.try_get_user("some-user")

        assert result == (True, some_user)
        assert result.found is True
        assert result.user == User(id="some-user", name="User!")


class TestAbsentUser:
    """Missing users are signaled per variant."""

    @pytest.mark.parametrize("user_id", ABSENT_IDS)
    def test_get_user_or_raise(self, service: UserService, user_id: str) -> None:
        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user_or_raise(user_id)

        assert exc_info.value.user_id == user_id

    @pytest.mark.parametrize("user_id", ABSENT_IDS)
    def test_get_user_or_default(self, service: UserService, user_id: str) -> None:
        assert service.get_user_or_default(user_id) is None

    @pytest.mark.parametrize("user_id", ABSENT_IDS)
    def test_try_get_user(self, service: UserService, user_id: str) -> None:
        result = service.try_get_user(user_id)

        assert result == TryGetResult(False, None)
        found, user = result
        assert found is False
        assert user is None

    def test_empty_string_not_found(self, service: UserService) -> None:
        """Empty ID raises with the empty ID attached."""
        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user_or_raise("")

        assert exc_info.value.user_id == ""

    def test_not_found_chains_lookup_miss(self, service: UserService) -> None:
        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user_or_raise("nonexistent-xyz")

        err = exc_info.value
        assert isinstance(err.__cause__, KeyError)
        assert err.cause is err.__cause__
        assert err.cause.args == ("nonexistent-xyz",)

    def test_not_found_message(self, service: UserService) -> None:
        with pytest.raises(UserNotFoundError, match="nonexistent-xyz"):
            service.get_user_or_raise("nonexistent-xyz")


class TestIdempotence:
    """Repeated calls give identical results."""

    @pytest.mark.parametrize("user_id", ["some-user", "", "nonexistent-xyz"])
    def test_repeated_calls(self, service: UserService, user_id: str) -> None:
        assert service.get_user_or_default(user_id) == service.get_user_or_default(user_id)
        assert service.try_get_user(user_id) == service.try_get_user(user_id)

    def test_repeated_raise(self, service: UserService) -> None:
        ids = []
        for _ in range(2):
            with pytest.raises(UserNotFoundError) as exc_info:
                service.get_user_or_raise("")
            ids.append(exc_info.value.user_id)

        assert ids == ["", ""]


class TestStoreIsReadOnly:
    """Fetches never mutate the store."""

    def test_store_unchanged_after_calls(self, service: UserService) -> None:
        before = dict(service.users)

        for user_id in ["some-user", "", "nonexistent-xyz"]:
            service.get_user_or_default(user_id)
            service.try_get_user(user_id)
            try:
                service.get_user_or_raise(user_id)
            except UserNotFoundError:
                pass

        assert dict(service.users) == before
        assert len(service) == 1

    def test_users_view_is_read_only(self, service: UserService) -> None:
        with pytest.raises(TypeError):
            service.users["new"] = User(id="new", name="New")  # type: ignore[index]

    def test_user_is_frozen(self, some_user: User) -> None:
        from dataclasses import FrozenInstanceError

        with pytest.raises(FrozenInstanceError):
            some_user.name = "Changed"  # type: ignore[misc]

    def test_constructor_copies_input(self, some_user: User) -> None:
        users = [some_user]
        service = UserService(users)
        users.append(User(id="late", name="Late"))

        assert "late" not in service


class TestConstruction:
    """Store construction."""

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(DuplicateUserError) as exc_info:
            UserService([User(id="a", name="A"), User(id="a", name="B")])

        assert exc_info.value.user_id == "a"

    def test_empty_store(self) -> None:
        service = UserService()

        assert len(service) == 0
        assert service.get_user_or_default("") is None

    def test_contains_and_iter(self, service: UserService) -> None:
        assert "some-user" in service
        assert "" not in service
        assert list(service) == ["some-user"]

    def test_benchmark_store(self) -> None:
        service = UserService.create_for_benchmark()

        assert len(service) == 1
        assert service.get_user_or_raise(BENCHMARK_USER_ID).name == "User!"
        assert "" not in service

    def test_repr(self, service: UserService) -> None:
        assert repr(service) == "UserService(users=1)"
