import pytest

from onelogin import OneLoginClient
from onelogin.api.exceptions import ConfigurationError
from onelogin.config import settings
from onelogin.config.settings import ClientConfig, _load_secret_from_file, load_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for var in ("ONELOGIN_CLIENT_ID", "ONELOGIN_CLIENT_SECRET", "ONELOGIN_REGION", "ONELOGIN_TIMEOUT", "ONELOGIN_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings, "SECRETS_DIR", str(tmp_path))
    return tmp_path


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ONELOGIN_CLIENT_ID", "env-id")
    monkeypatch.setenv("ONELOGIN_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("ONELOGIN_REGION", "EU")
    monkeypatch.setenv("ONELOGIN_TIMEOUT", "12.5")

    cfg = load_settings()

    assert cfg.client_id == "env-id"
    assert cfg.client_secret == "env-secret"
    assert cfg.region == "eu"
    assert cfg.timeout == 12.5
    assert cfg.user_agent is None


def test_secret_file_takes_priority_over_env(monkeypatch, isolated_env):
    (isolated_env / "onelogin_client_secret").write_text("file-secret\n")
    monkeypatch.setenv("ONELOGIN_CLIENT_SECRET", "env-secret")

    assert _load_secret_from_file("onelogin_client_secret", "ONELOGIN_CLIENT_SECRET") == "file-secret"


def test_empty_secret_file_falls_back_to_env(monkeypatch, isolated_env):
    (isolated_env / "onelogin_client_id").write_text("   ")
    monkeypatch.setenv("ONELOGIN_CLIENT_ID", "env-id")

    assert _load_secret_from_file("onelogin_client_id", "ONELOGIN_CLIENT_ID") == "env-id"


def test_missing_credentials_raise():
    with pytest.raises(ConfigurationError):
        load_settings()


def test_unknown_region_raises(monkeypatch):
    monkeypatch.setenv("ONELOGIN_CLIENT_ID", "id")
    monkeypatch.setenv("ONELOGIN_CLIENT_SECRET", "secret")
    monkeypatch.setenv("ONELOGIN_REGION", "mars")

    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_invalid_timeout_raises(monkeypatch, value):
    monkeypatch.setenv("ONELOGIN_CLIENT_ID", "id")
    monkeypatch.setenv("ONELOGIN_CLIENT_SECRET", "secret")
    monkeypatch.setenv("ONELOGIN_TIMEOUT", value)

    with pytest.raises(ConfigurationError):
        load_settings()


def test_repr_hides_secret():
    cfg = ClientConfig(client_id="id", client_secret="super-secret")
    assert "super-secret" not in repr(cfg)


def test_client_from_config(transport):
    cfg = ClientConfig(client_id="id", client_secret="secret", region="eu", user_agent="my-agent/1.0")

    client = OneLoginClient.from_config(cfg, transport=transport)

    assert client.base_url == "https://api.eu.onelogin.com"
    assert client.user_agent == "my-agent/1.0"
    assert client.transport is transport


def test_client_from_settings(monkeypatch):
    monkeypatch.setenv("ONELOGIN_CLIENT_ID", "id")
    monkeypatch.setenv("ONELOGIN_CLIENT_SECRET", "secret")
    monkeypatch.setenv("ONELOGIN_TIMEOUT", "9")

    client = OneLoginClient.from_settings()

    assert client.client_id == "id"
    assert client.transport.timeout == 9.0
