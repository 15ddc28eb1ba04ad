import json
import sys

import pytest

import scripts.onelogin_cli as cli
from onelogin.api.exceptions import ErrorStatus
from onelogin.config import ClientConfig, settings


@pytest.fixture(autouse=True)
def restore_sys_argv():
    """Make sure every test sees a clean CLI invocation."""
    original = sys.argv[:]
    yield
    sys.argv = original


class _ClientFactory:
    """Stands in for OneLoginClient and hands out the fixture client."""

    def __init__(self, client):
        self.client = client
        self.created = []

    def __call__(self, client_id, client_secret, region):
        self.created.append((client_id, client_secret, region))
        return self.client

    def from_config(self, config):
        self.created.append(config)
        return self.client


@pytest.fixture()
def cli_client(monkeypatch, client):
    """Route the CLI's client construction to the fixture client."""
    monkeypatch.delenv("ONELOGIN_REGION", raising=False)
    factory = _ClientFactory(client)
    monkeypatch.setattr(cli, "OneLoginClient", factory)
    return factory.created


def test_requires_credentials(monkeypatch, tmp_path):
    """CLI must abort before building a client if credentials are absent."""
    monkeypatch.delenv("ONELOGIN_CLIENT_ID", raising=False)
    monkeypatch.delenv("ONELOGIN_CLIENT_SECRET", raising=False)
    monkeypatch.setattr(settings, "SECRETS_DIR", str(tmp_path))

    def fail_if_called(*args, **kwargs):
        raise AssertionError("client should not be built without credentials")

    monkeypatch.setattr(cli, "OneLoginClient", fail_if_called)
    sys.argv = ["onelogin_cli.py", "token"]

    with pytest.raises(SystemExit):
        cli.main()


def test_roles_prints_json(cli_client, transport, token_response, page, capsys):
    transport.queue("POST", "/auth/oauth2/token", token_response())
    transport.queue("GET", "/api/1/roles", page([{"id": 1, "name": "Admin"}, {"id": 2, "name": "Dev"}]))
    sys.argv = ["onelogin_cli.py", "--client-id", "id", "--client-secret", "s", "--region", "eu", "roles", "--limit", "5"]

    cli.main()

    assert cli_client == [("id", "s", "eu")]
    assert json.loads(capsys.readouterr().out) == [{"id": 1, "name": "Admin"}, {"id": 2, "name": "Dev"}]
    assert transport.calls_to("/api/1/roles")[0].params == {"limit": 5}


def test_user_failure_exits_with_error(cli_client, transport, token_response, stub_response, capsys):
    transport.queue("POST", "/auth/oauth2/token", token_response())
    transport.queue("GET", "/api/1/users/9", stub_response({"status": {"type": "not found", "message": "User not found"}}, 404))
    sys.argv = ["onelogin_cli.py", "--client-id", "id", "--client-secret", "s", "user", "--id", "9"]

    with pytest.raises(SystemExit) as exc:
        cli.main()

    assert exc.value.code == 1
    assert "[user] Error: 404 User not found" in capsys.readouterr().err


def test_users_cursor_failure_exits(cli_client, transport, stub_response):
    transport.queue("POST", "/auth/oauth2/token", stub_response({"status": {"type": "Unauthorized", "message": "Unauthorized"}}, 401))
    sys.argv = ["onelogin_cli.py", "--client-id", "id", "--client-secret", "s", "users"]

    with pytest.raises(SystemExit):
        cli.main()


def test_token_command(cli_client, client, transport, token_response, capsys):
    transport.queue("POST", "/auth/oauth2/token", token_response())
    sys.argv = ["onelogin_cli.py", "--client-id", "id", "--client-secret", "s", "token"]

    cli.main()

    out = json.loads(capsys.readouterr().out)
    assert out["access_token"] == "access-1"
    assert client.error_status == ErrorStatus()


def test_half_given_credentials_are_rejected(cli_client):
    sys.argv = ["onelogin_cli.py", "--client-id", "id", "token"]

    with pytest.raises(SystemExit):
        cli.main()
    assert cli_client == []


def test_credentials_default_to_loaded_settings(monkeypatch, cli_client, transport, token_response, capsys):
    config = ClientConfig(client_id="from-secrets", client_secret="s", region="us", timeout=9.0)
    monkeypatch.setattr(cli, "load_settings", lambda: config)
    transport.queue("POST", "/auth/oauth2/token", token_response())
    sys.argv = ["onelogin_cli.py", "--region", "eu", "token"]

    cli.main()

    assert cli_client == [config]
    assert config.region == "eu"
    assert json.loads(capsys.readouterr().out)["access_token"] == "access-1"


def test_settings_errors_abort(monkeypatch, cli_client):
    monkeypatch.setenv("ONELOGIN_CLIENT_ID", "id")
    monkeypatch.setenv("ONELOGIN_CLIENT_SECRET", "s")
    monkeypatch.setenv("ONELOGIN_TIMEOUT", "soon")
    sys.argv = ["onelogin_cli.py", "token"]

    with pytest.raises(SystemExit) as exc:
        cli.main()
    assert exc.value.code == 2
    assert cli_client == []


def test_user_output_includes_custom_attributes(cli_client, transport, token_response, success_envelope, capsys):
    transport.queue("POST", "/auth/oauth2/token", token_response())
    transport.queue("GET", "/api/1/users/9", success_envelope([{"id": 9, "custom_attributes": {"team": "red"}}]))
    sys.argv = ["onelogin_cli.py", "--client-id", "id", "--client-secret", "s", "user", "--id", "9"]

    cli.main()

    out = json.loads(capsys.readouterr().out)
    assert out["id"] == 9
    assert out["custom_attributes"] == {"team": "red"}
