"""OneLogin session login token operations."""
from __future__ import annotations
from typing import Any, Dict, Optional, Union

from .client import ApiClient, public_operation
from .constants import GET_TOKEN_VERIFY_FACTOR, SESSION_LOGIN_TOKEN_URL
from .exceptions import ApiError
from .models import SessionTokenInfo, SessionTokenMFAInfo
from .responses import handle_session_token_response

REQUIRED_LOGIN_PARAMS = ("username_or_email", "password", "subdomain")

SessionTokenResult = Union[SessionTokenInfo, SessionTokenMFAInfo]


class SessionService:
    """Service for creating session login tokens, including the MFA step."""

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation()
    def create_session_login_token(
        self,
        query_params: Dict[str, Any],
        allowed_origin: str = "",
    ) -> Optional[SessionTokenResult]:
        """Generate a session login token; it expires two minutes after creation.

        Args:
            query_params: username_or_email, password and subdomain (required),
                plus optional return_to_url, ip_address and browser_id
            allowed_origin: Origin URI allowed for CORS requests

        Returns:
            SessionTokenInfo, or SessionTokenMFAInfo when MFA is required.
            None on failure.

        Raises:
            ResponseShapeError: If the status message is not recognized
        """
        missing = [key for key in REQUIRED_LOGIN_PARAMS if not (query_params or {}).get(key)]
        if missing:
            raise ApiError("400", "username_or_email, password and subdomain are required parameters")

        headers = {}
        if allowed_origin:
            headers["Custom-Allowed-Origin-Header-1"] = allowed_origin

        url = self.client.get_url(SESSION_LOGIN_TOKEN_URL)
        resp = self.client.request("POST", url, body=query_params, extra_headers=headers)
        return handle_session_token_response(resp, url)

    @public_operation()
    def get_session_token_verified(
        self,
        device_id: Union[str, int],
        state_token: str,
        otp_token: Optional[str] = None,
    ) -> Optional[SessionTokenResult]:
        """Verify a one-time password for an MFA challenge.

        Args:
            device_id: MFA device ID from the challenge
            state_token: State token from the challenge
            otp_token: OTP value (omit for push-based factors)
        """
        data = {
            "device_id": str(device_id),
            "state_token": state_token,
        }
        if otp_token:
            data["otp_token"] = otp_token

        url = self.client.get_url(GET_TOKEN_VERIFY_FACTOR)
        resp = self.client.request("POST", url, body=data)
        return handle_session_token_response(resp, url)
