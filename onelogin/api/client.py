"""Low-level HTTP client for the OneLogin API.

Handles authentication, token lifecycle and error capture. Resource services
(users, roles, groups, ...) build requests and hand them to this client.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

import requests

from ..version import __version__
from .constants import BASE_URL, DEFAULT_REGION, TOKEN_REQUEST_URL, TOKEN_REVOKE_URL, GET_RATE_URL
from .cursor import Cursor
from .exceptions import (
    ApiError,
    ConfigurationError,
    ErrorStatus,
    HttpStatusError,
    NO_ERROR,
    ResponseShapeError,
    TransportError,
)
from .models import OneLoginToken, RateLimit
from .responses import extract_error_message, first_data_item, handle_operation_response, parse_json
from .token import TokenState
from .transport import HttpTransport, REQUEST_TIMEOUT

DEFAULT_USER_AGENT = f"onelogin-python-sdk v{__version__}"

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _mask(token: Optional[str]) -> str:
    if not token:
        return "<none>"
    return f"...{token[-4:]}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def public_operation(default: Any = None, default_factory: Optional[Callable[[], Any]] = None):
    """Wrap a public SDK call with error capture.

    The client's error status is cleared on entry. Transport and HTTP status
    failures are recorded and the default value is returned. Shape failures
    are recorded and re-raised.

    Works on ApiClient methods and on services holding the client as ``self.client``.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            api = self if isinstance(self, ApiClient) else self.client
            api.clean_error()
            try:
                return func(self, *args, **kwargs)
            except ResponseShapeError as e:
                api.record_error(e)
                logger.error(f"{func.__name__}: unexpected response shape: {e}")
                raise
            except ApiError as e:
                api.record_error(e)
                logger.warning(f"{func.__name__} failed: {e}")
                return default_factory() if default_factory is not None else default
        return wrapper
    return decorator


@dataclass(frozen=True)
class Result(Generic[T]):
    """Value returned by an operation together with the error it recorded."""

    value: Optional[T]
    error: ErrorStatus

    @property
    def ok(self) -> bool:
        return not self.error


class ApiClient:
    """HTTP client for the OneLogin API with lazy token management.

    Features:
    - Token acquired on first use and refreshed once expired
    - Error status (code, description) recorded by every failing public call
    - Lazy cursor-based pagination

    Usage:
        client = ApiClient("client-id", "client-secret", region="us")
        user = client.fetch_one("GET", client.get_url("/api/1/users/{}", 42), User.from_dict)
        if user is None:
            print(client.error, client.error_description)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: Optional[str] = None,
        *,
        transport: Optional[HttpTransport] = None,
        timeout: float = REQUEST_TIMEOUT,
        user_agent: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the client.

        Args:
            client_id: API credential client ID
            client_secret: API credential client secret
            region: Account region, "us" or "eu" (default: us)
            transport: HTTP transport (defaults to a requests-based one)
            timeout: Per-request timeout in seconds for the default transport
            user_agent: User-Agent header value
            clock: Callable returning the current aware UTC datetime

        Raises:
            ConfigurationError: If client_id or client_secret is missing
        """
        if not client_id or not client_secret:
            raise ConfigurationError("client_id & client_secret are required")

        self.client_id = client_id
        self.client_secret = client_secret
        self.region = region or DEFAULT_REGION
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.transport = transport or HttpTransport(timeout=timeout)
        self._clock = clock or _utcnow
        self._token = TokenState()
        self._error: ErrorStatus = NO_ERROR

    # ─────────────────────────────────────────────────────────────────────
    # Error status
    # ─────────────────────────────────────────────────────────────────────
    @property
    def error_status(self) -> ErrorStatus:
        return self._error

    @property
    def error(self) -> Optional[str]:
        return self._error.code

    @property
    def error_description(self) -> Optional[str]:
        return self._error.description

    def clean_error(self) -> None:
        """Clear any error registered by a previous operation."""
        self._error = NO_ERROR

    def record_error(self, error: ApiError) -> None:
        self._error = error.to_status()

    def attempt(self, operation: Callable[..., T], *args, **kwargs) -> Result[T]:
        """Run a public operation and return its value with the error it recorded.

        Example:
            result = client.attempt(client.users.get_user, 42)
            if not result.ok:
                print(result.error.code)
        """
        value = operation(*args, **kwargs)
        return Result(value=value, error=self._error)

    # ─────────────────────────────────────────────────────────────────────
    # URLs and headers
    # ─────────────────────────────────────────────────────────────────────
    @property
    def base_url(self) -> str:
        return BASE_URL.format(region=self.region)

    def get_url(self, template: str, *ids: Any) -> str:
        return self.base_url + template.format(*ids)

    def authorization_header(self, bearer: bool = True) -> str:
        """Return the Authorization header value.

        Resource calls use ``bearer:<token>``; token lifecycle calls use the
        client credentials pair.
        """
        if bearer:
            return f"bearer:{self._token.access_token}"
        return f"client_id:{self.client_id},client_secret:{self.client_secret}"

    def request_headers(self, authorization: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if authorization is not None:
            headers["Authorization"] = authorization
        return headers

    # ─────────────────────────────────────────────────────────────────────
    # Request execution
    # ─────────────────────────────────────────────────────────────────────
    def raw_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> requests.Response:
        """Send a request, converting connectivity failures to TransportError."""
        try:
            return self.transport.do_request(method, url, headers, params=params, body=body)
        except requests.RequestException as e:
            raise TransportError(str(e), url) from e

    def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> requests.Response:
        """Send a request and classify the outcome.

        Raises:
            TransportError: On connectivity errors
            HttpStatusError: On any non-200 status
        """
        resp = self.raw_request(method, url, headers, params=params, body=body)
        if resp.status_code != 200:
            raise HttpStatusError(resp.status_code, extract_error_message(resp), url)
        return resp

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Execute an authenticated request, acquiring or refreshing the token first.

        Raises:
            ApiError: On token, transport or HTTP status failure
        """
        self._prepare_token()
        headers = self.request_headers(self.authorization_header())
        if extra_headers:
            headers.update(extra_headers)
        return self._send(method, url, headers, params=params, body=body)

    # ─────────────────────────────────────────────────────────────────────
    # Token lifecycle
    # ─────────────────────────────────────────────────────────────────────
    @property
    def access_token(self) -> Optional[str]:
        return self._token.access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._token.refresh_token

    @property
    def expiration(self) -> Optional[datetime]:
        return self._token.expiration

    def is_expired(self) -> bool:
        return self._token.is_expired(self._clock())

    def _prepare_token(self) -> None:
        if not self._token.has_token:
            self._acquire()
        elif self.is_expired():
            self._refresh()

    def _store_token(self, resp: requests.Response, url: str) -> OneLoginToken:
        token = OneLoginToken.from_dict(first_data_item(resp, url))
        if not token.access_token or token.created_at is None:
            raise ResponseShapeError("token response lacks access_token or created_at", url)
        self._token.update(token)
        return token

    def _acquire(self) -> OneLoginToken:
        url = self.get_url(TOKEN_REQUEST_URL)
        headers = self.request_headers(self.authorization_header(bearer=False))
        resp = self._send("POST", url, headers, body={"grant_type": "client_credentials"})
        token = self._store_token(resp, url)
        logger.info(f"Acquired access token {_mask(token.access_token)} (expires {self._token.expiration})")
        return token

    def _refresh(self) -> OneLoginToken:
        url = self.get_url(TOKEN_REQUEST_URL)
        data = {
            "grant_type": "refresh_token",
            "access_token": self._token.access_token,
            "refresh_token": self._token.refresh_token,
        }
        resp = self._send("POST", url, self.request_headers(), body=data)
        token = self._store_token(resp, url)
        logger.info(f"Refreshed access token {_mask(token.access_token)} (expires {self._token.expiration})")
        return token

    def ensure_valid_token(self) -> Optional[ErrorStatus]:
        """Make sure an unexpired access token is held.

        Acquires a token when none was ever obtained and refreshes it once
        expired; otherwise does nothing.
        A token that is already expired on receipt is reported as a failure.

        Returns:
            None on success, otherwise the recorded error status
        """
        self.clean_error()
        try:
            self._prepare_token()
            if self.is_expired():
                raise ApiError("500", f"access token expired at {self._token.expiration}", self.get_url(TOKEN_REQUEST_URL))
        except ResponseShapeError as e:
            self.record_error(e)
            raise
        except ApiError as e:
            self.record_error(e)
            logger.warning(f"Unable to obtain a valid access token: {e}")
            return self._error
        return None

    @public_operation()
    def get_access_token(self) -> Optional[OneLoginToken]:
        """Generate an access token and refresh token with the client credentials.

        Returns:
            The generated token, or None on failure
        """
        return self._acquire()

    @public_operation()
    def regenerate_token(self) -> Optional[OneLoginToken]:
        """Exchange the current refresh token for a new token pair.

        Returns:
            The refreshed token, or None on failure
        """
        return self._refresh()

    @public_operation(default=False)
    def revoke_token(self) -> bool:
        """Revoke the current access token and forget the token set.

        Returns:
            True if the token was revoked
        """
        url = self.get_url(TOKEN_REVOKE_URL)
        headers = self.request_headers(self.authorization_header(bearer=False))
        self._send("POST", url, headers, body={"access_token": self._token.access_token})
        logger.info(f"Revoked access token {_mask(self._token.access_token)}")
        self._token.clear()
        return True

    @public_operation()
    def get_rate_limits(self) -> Optional[RateLimit]:
        """Get the current rate limit details of the access token."""
        url = self.get_url(GET_RATE_URL)
        resp = self.request("GET", url)
        content = parse_json(resp)
        if not content or not isinstance(content.get("data"), dict):
            raise ResponseShapeError("rate limit response has no 'data' object", url)
        return RateLimit.from_dict(content["data"])

    # ─────────────────────────────────────────────────────────────────────
    # Response helpers
    # ─────────────────────────────────────────────────────────────────────
    @public_operation()
    def fetch_one(
        self,
        method: str,
        url: str,
        model: Callable[[Dict[str, Any]], T],
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[T]:
        """Execute a request whose envelope carries one object in ``data[0]``.

        Returns:
            The decoded record, or None on transport/status failure

        Raises:
            ResponseShapeError: If a 200 response has no data
        """
        resp = self.request(method, url, params=params, body=body)
        return model(first_data_item(resp, url))

    @public_operation(default=False)
    def perform_boolean_op(
        self,
        method: str,
        url: str,
        body: Optional[Any] = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> bool:
        """Execute a request answered by a status envelope.

        Returns:
            True when ``status.type`` is "success"; False otherwise, including
            for malformed bodies
        """
        resp = self.request(method, url, body=body, extra_headers=extra_headers)
        if handle_operation_response(resp):
            return True
        content = parse_json(resp)
        if content is None:
            self._error = ErrorStatus("500", "malformed response body")
        else:
            self._error = ErrorStatus(str(resp.status_code), extract_error_message(resp))
        return False

    @public_operation()
    def paginate(
        self,
        url: str,
        model: Callable[[Dict[str, Any]], T],
        params: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> Cursor[T]:
        """Return a lazy cursor over a paginated list endpoint."""
        return Cursor(self, url, model, params=params, limit=limit)
