"""Property-based tests using Hypothesis for the lookup service.

Checks that the three lookup variants agree on every input.
"""
from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from errorcost.exceptions import UserNotFoundError
from errorcost.models import User
from errorcost.service import UserService

user_ids = st.text(max_size=20)
users = st.builds(User, id=user_ids, name=st.text(max_size=20))
stores = st.dictionaries(user_ids, st.text(max_size=20), max_size=8).map(
    lambda mapping: [User(id=key, name=name) for key, name in mapping.items()]
)


@settings(max_examples=200)
@given(store=stores, user_id=user_ids)
def test_variants_agree(store: list[User], user_id: str) -> None:
    """All three variants report the same user, or the same absence."""
    service = UserService(store)
    expected = {user.id: user for user in store}.get(user_id)

    found, user = service.try_get_user(user_id)
    assert service.get_user_or_default(user_id) == expected
    assert found is (expected is not None)
    assert user == expected

    if expected is None:
        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user_or_raise(user_id)
        assert exc_info.value.user_id == user_id
    else:
        assert service.get_user_or_raise(user_id) == expected


@given(store=stores, user_id=user_ids)
def test_default_and_try_get_never_raise(store: list[User], user_id: str) -> None:
    service = UserService(store)

    service.get_user_or_default(user_id)
    service.try_get_user(user_id)


@given(store=stores, queries=st.lists(user_ids, max_size=10))
def test_lookups_do_not_mutate_store(store: list[User], queries: list[str]) -> None:
    service = UserService(store)
    before = dict(service.users)

    for user_id in queries:
        service.get_user_or_default(user_id)
        service.try_get_user(user_id)
        try:
            service.get_user_or_raise(user_id)
        except UserNotFoundError:
            pass

    assert dict(service.users) == before


@given(user=users)
def test_stored_user_is_returned_as_is(user: User) -> None:
    service = UserService([user])

    assert service.get_user_or_raise(user.id) is user
    assert service.get_user_or_default(user.id) is user
    assert service.try_get_user(user.id) == (True, user)
