"""OneLogin SAML assertion operations."""
from __future__ import annotations
from typing import Optional, Union

from .client import ApiClient, public_operation
from .constants import GET_SAML_ASSERTION_URL, GET_SAML_VERIFY_FACTOR
from .models import SAMLEndpointResponse
from .responses import handle_saml_endpoint_response


class SamlService:
    """Service for generating SAML assertions."""

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation()
    def get_saml_assertion(
        self,
        username_or_email: str,
        password: str,
        app_id: Union[str, int],
        subdomain: str,
        ip_address: Optional[str] = None,
    ) -> Optional[SAMLEndpointResponse]:
        """Generate a SAML assertion for an app.

        Args:
            username_or_email: User accessing the app
            password: User's password
            app_id: App to generate the assertion for
            subdomain: Account subdomain
            ip_address: Whitelisted IP address that bypasses MFA

        Returns:
            Response holding the encoded SAMLResponse, or an MFA challenge
        """
        data = {
            "username_or_email": username_or_email,
            "password": password,
            "app_id": app_id,
            "subdomain": subdomain,
        }
        if ip_address:
            data["ip_address"] = ip_address

        url = self.client.get_url(GET_SAML_ASSERTION_URL)
        resp = self.client.request("POST", url, body=data)
        return handle_saml_endpoint_response(resp, url)

    @public_operation()
    def get_saml_assertion_verifying(
        self,
        app_id: Union[str, int],
        device_id: Union[str, int],
        state_token: str,
        otp_token: Optional[str] = None,
        url_endpoint: Optional[str] = None,
    ) -> Optional[SAMLEndpointResponse]:
        """Verify the second factor of a SAML assertion request.

        Args:
            url_endpoint: Callback URL from the MFA challenge; defaults to the
                standard verify-factor endpoint
        """
        url = url_endpoint or self.client.get_url(GET_SAML_VERIFY_FACTOR)
        data = {
            "app_id": app_id,
            "device_id": str(device_id),
            "state_token": state_token,
        }
        if otp_token:
            data["otp_token"] = otp_token

        resp = self.client.request("POST", url, body=data)
        return handle_saml_endpoint_response(resp, url)
