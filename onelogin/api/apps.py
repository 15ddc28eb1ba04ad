"""Embeddable apps (legacy XML endpoint)."""
from __future__ import annotations
from typing import List, Optional

from .client import ApiClient, public_operation
from .constants import EMBED_APP_URL
from .exceptions import ApiError
from .models import EmbedApp
from .responses import retrieve_apps_from_xml


class AppService:
    """Service for the embed apps endpoint.

    This endpoint is authenticated with an embedding token, not the bearer
    token, and answers with XML.
    """

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation()
    def get_embed_apps(self, token: str, email: str) -> Optional[List[EmbedApp]]:
        """List the apps a user can embed.

        Args:
            token: Embedding token
            email: Email of the user

        Returns:
            Apps, or None on failure (the error description holds the raw body)
        """
        headers = {"User-Agent": self.client.user_agent}
        resp = self.client.raw_request("GET", EMBED_APP_URL, headers, params={"token": token, "email": email})
        body = resp.text or ""
        if resp.status_code != 200 or not body.strip():
            raise ApiError(str(resp.status_code), body, EMBED_APP_URL)
        return retrieve_apps_from_xml(body, EMBED_APP_URL)
