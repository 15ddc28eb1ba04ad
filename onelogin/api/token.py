"""In-memory bearer token state for one client instance."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .models import OneLoginToken


@dataclass
class TokenState:
    """Mutable holder of the current token set.

    The expiration is always derived from the token's creation instant and
    lifetime; it is never assigned on its own.
    """

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expiration: Optional[datetime] = None

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)

    def is_expired(self, now: datetime) -> bool:
        """Return True unless ``now`` is strictly before the expiration."""
        if self.expiration is None:
            return True
        return not now < self.expiration

    def update(self, token: OneLoginToken) -> None:
        """Replace the whole token set with a freshly issued token."""
        created_at = token.created_at
        if created_at is None:
            raise ValueError("token has no created_at timestamp")
        self.access_token = token.access_token
        self.refresh_token = token.refresh_token
        self.expiration = created_at + timedelta(seconds=token.expires_in or 0)

    def clear(self) -> None:
        self.access_token = None
        self.refresh_token = None
        self.expiration = None
