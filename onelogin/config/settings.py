"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..api.constants import DEFAULT_REGION
from ..api.exceptions import ConfigurationError
from ..api.transport import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

SECRETS_DIR = "/run/secrets"
SUPPORTED_REGIONS = ("us", "eu")


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path(SECRETS_DIR) / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.debug(f"[settings] Loaded {secret_name} from {SECRETS_DIR}")
                return secret_value
        except OSError as e:
            logger.warning(f"[settings] Failed to read {SECRETS_DIR}/{secret_name}: {e}")

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug(f"[settings] Loaded {env_var} from environment (fallback)")
            return secret_value

    return None


@dataclass
class ClientConfig:
    """OneLogin client configuration container."""
    client_id: str
    client_secret: str
    region: str = DEFAULT_REGION
    timeout: float = REQUEST_TIMEOUT
    user_agent: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"ClientConfig(client_id={self.client_id!r}, client_secret='***', "
            f"region={self.region!r}, timeout={self.timeout!r}, user_agent={self.user_agent!r})"
        )


def _get_timeout() -> float:
    raw = os.environ.get("ONELOGIN_TIMEOUT", "").strip()
    if not raw:
        return REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"ONELOGIN_TIMEOUT must be a number, got '{raw}'")
    if timeout <= 0:
        raise ConfigurationError("ONELOGIN_TIMEOUT must be positive")
    return timeout


def load_settings() -> ClientConfig:
    """Load client settings from /run/secrets and environment variables.

    Raises:
        ConfigurationError: If credentials are missing or a value is invalid
    """
    client_id = _load_secret_from_file("onelogin_client_id", "ONELOGIN_CLIENT_ID")
    client_secret = _load_secret_from_file("onelogin_client_secret", "ONELOGIN_CLIENT_SECRET")
    if not client_id or not client_secret:
        raise ConfigurationError(
            "ONELOGIN_CLIENT_ID and ONELOGIN_CLIENT_SECRET are required "
            f"(environment or {SECRETS_DIR})."
        )

    region = os.environ.get("ONELOGIN_REGION", DEFAULT_REGION).strip().lower() or DEFAULT_REGION
    if region not in SUPPORTED_REGIONS:
        raise ConfigurationError(f"Unsupported ONELOGIN_REGION '{region}' (expected one of {SUPPORTED_REGIONS})")

    user_agent = os.environ.get("ONELOGIN_USER_AGENT", "").strip() or None

    config = ClientConfig(
        client_id=client_id,
        client_secret=client_secret,
        region=region,
        timeout=_get_timeout(),
        user_agent=user_agent,
    )
    logger.info(f"[settings] region={config.region}; client_id={config.client_id}")
    return config
