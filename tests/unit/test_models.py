from datetime import datetime, timezone

import pytest

from onelogin.api.models import Event, OneLoginToken, User, _parse_datetime


def test_token_created_at_is_parsed_as_utc():
    token = OneLoginToken.from_dict({
        "access_token": "a",
        "created_at": "2015-11-11T03:36:18.714Z",
        "expires_in": 36000,
        "refresh_token": "r",
        "token_type": "bearer",
        "account_id": "555555",
    })

    assert token.created_at == datetime(2015, 11, 11, 3, 36, 18, 714000, tzinfo=timezone.utc)
    assert token.expires_in == 36000
    assert token.account_id == 555555


def test_user_from_dict_ignores_unknown_keys():
    user = User.from_dict({
        "id": 42,
        "email": "alice@example.com",
        "username": "alice",
        "role_id": [1, 2],
        "custom_attributes": {"team": "blue"},
        "last_login": "2026-01-01T10:00:00Z",
        "unexpected": "value",
    })

    assert user.id == 42
    assert user.role_ids == (1, 2)
    assert user.custom_attributes == {"team": "blue"}
    assert user.last_login.hour == 10
    assert user.updated_at is None


def test_records_are_immutable():
    user = User.from_dict({"id": 1, "custom_attributes": {"team": "blue"}})
    with pytest.raises(AttributeError):
        user.id = 2
    with pytest.raises(TypeError):
        user.custom_attributes["team"] = "red"


def test_user_is_hashable():
    first = User.from_dict({"id": 1, "custom_attributes": {"team": "blue"}})
    second = User.from_dict({"id": 1, "custom_attributes": {"team": "blue"}})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


@pytest.mark.parametrize("value", [None, "", "yesterday", 12])
def test_unparsable_datetimes_become_none(value):
    assert _parse_datetime(value) is None


def test_event_from_dict():
    event = Event.from_dict({"id": "7", "event_type_id": 13, "user_name": "alice", "created_at": "2026-01-01T00:00:00+01:00"})

    assert event.id == 7
    assert event.event_type_id == 13
    assert event.created_at == datetime(2025, 12, 31, 23, 0, tzinfo=timezone.utc)
