"""OneLogin invite link operations."""
from __future__ import annotations
from typing import Optional

from .client import ApiClient, public_operation
from .constants import GENERATE_INVITE_LINK_URL, SEND_INVITE_LINK_URL
from .responses import first_data_item


class InviteService:
    """Service for generating and sending invite links to existing users."""

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation()
    def generate_invite_link(self, email: str) -> Optional[str]:
        """Return an invite link for the user with this email address."""
        url = self.client.get_url(GENERATE_INVITE_LINK_URL)
        resp = self.client.request("POST", url, body={"email": email})
        return first_data_item(resp, url)

    def send_invite_link(self, email: str, personal_email: Optional[str] = None) -> bool:
        """Send an invite link, optionally to an address other than the account email."""
        data = {"email": email}
        if personal_email:
            data["personal_email"] = personal_email
        return self.client.perform_boolean_op("POST", self.client.get_url(SEND_INVITE_LINK_URL), body=data)
