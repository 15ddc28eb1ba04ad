"""Error status channel across public operations."""
import pytest
import requests

from onelogin import OneLoginClient
from onelogin.api.exceptions import ConfigurationError, ErrorStatus

UNAUTHORIZED = {"status": {"message": "Unauthorized", "type": "Unauthorized"}}


def test_client_requires_credentials():
    with pytest.raises(ConfigurationError):
        OneLoginClient("", "secret")
    with pytest.raises(ConfigurationError):
        OneLoginClient("id", None)


def test_region_selects_base_url(transport):
    client = OneLoginClient("id", "secret", "eu", transport=transport)

    assert client.get_url("/api/1/users/{}", 5) == "https://api.eu.onelogin.com/api/1/users/5"


def test_default_region_is_us(transport):
    assert OneLoginClient("id", "secret", transport=transport).base_url == "https://api.us.onelogin.com"


@pytest.mark.parametrize("call,expected", [
    (lambda c: c.users.get_user(1), None),
    (lambda c: c.users.assign_role_to_user(1, [2]), False),
    (lambda c: c.groups.get_group(1), None),
    (lambda c: c.invites.send_invite_link("a@example.com"), False),
])
def test_unauthorized_sets_status_and_returns_default(authed_client, transport, stub_response, call, expected):
    for method in ("GET", "PUT", "POST"):
        for path in ("/api/1/users/1", "/api/1/users/1/add_roles", "/api/1/groups/1", "/api/1/invites/send_invite_link"):
            transport.queue(method, path, stub_response(UNAUTHORIZED, 401))

    assert call(authed_client) is expected
    assert authed_client.error_status == ErrorStatus("401", "Unauthorized")


def test_error_cleared_by_next_successful_call(authed_client, transport, stub_response, success_envelope):
    transport.queue("GET", "/api/1/users/1", stub_response(UNAUTHORIZED, 401), success_envelope([{"id": 1}]))

    assert authed_client.users.get_user(1) is None
    assert authed_client.error == "401"

    assert authed_client.users.get_user(1).id == 1
    assert authed_client.error is None
    assert not authed_client.error_status


def test_failed_token_acquisition_fails_resource_call(client, transport, stub_response):
    transport.queue("POST", "/auth/oauth2/token", stub_response({"status": {"type": "Unauthorized", "message": "Invalid client"}}, 401))

    assert client.users.assign_role_to_user(1, [2]) is False
    assert client.error_status == ErrorStatus("401", "Invalid client")
    assert transport.calls_to("/api/1/users/1/add_roles") == []


def test_transport_error_on_resource_call(authed_client, transport):
    transport.queue("GET", "/api/1/roles/3", requests.Timeout("read timed out"))

    assert authed_client.roles.get_role(3) is None
    assert authed_client.error_status == ErrorStatus("500", "read timed out")


def test_attempt_returns_value_and_error_together(authed_client, transport, stub_response, success_envelope):
    transport.queue("GET", "/api/1/users/1", stub_response(UNAUTHORIZED, 401), success_envelope([{"id": 1}]))

    failed = authed_client.attempt(authed_client.users.get_user, 1)
    succeeded = authed_client.attempt(authed_client.users.get_user, 1)

    assert not failed.ok
    assert failed.value is None
    assert failed.error == ErrorStatus("401", "Unauthorized")
    assert succeeded.ok
    assert succeeded.value.id == 1
