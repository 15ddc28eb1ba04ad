from unittest.mock import Mock

import pytest
import requests

from onelogin import OneLoginClient
from onelogin.api.exceptions import TransportError
from onelogin.api.transport import HttpTransport, REQUEST_TIMEOUT


def test_do_request_sends_json_with_timeout():
    session = Mock(spec=requests.Session)
    transport = HttpTransport(timeout=7, session=session)

    transport.do_request("PUT", "https://api.us.onelogin.com/api/1/users/1", {"A": "b"}, params={"x": 1}, body={"k": "v"})

    session.request.assert_called_once_with(
        "PUT",
        "https://api.us.onelogin.com/api/1/users/1",
        headers={"A": "b"},
        params={"x": 1},
        json={"k": "v"},
        timeout=7,
    )


def test_default_timeout():
    assert HttpTransport(session=Mock()).timeout == REQUEST_TIMEOUT


def test_raw_request_wraps_connection_errors():
    session = Mock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("refused")
    client = OneLoginClient("id", "secret", transport=HttpTransport(session=session))

    with pytest.raises(TransportError) as exc:
        client.raw_request("GET", "https://api.us.onelogin.com/x", {})

    assert exc.value.code == "500"
    assert "refused" in exc.value.description
