"""OneLogin API client library.

This package provides the building blocks of the SDK:

Architecture:
- client.py: HTTP client with token lifecycle and error capture
- cursor.py: Lazy cursor-based pagination
- responses.py: Envelope interpretation (status, session token, SAML, XML)
- models.py: Immutable resource records
- users.py, roles.py, groups.py, events.py, sessions.py, saml.py,
  invites.py, apps.py: Resource services
- exceptions.py: Error status and typed exceptions

Usage:
    from onelogin.api import ApiClient, UserService

    client = ApiClient("client-id", "client-secret")
    users = UserService(client)
    user = users.get_user(42)
"""
from .client import ApiClient, Result, public_operation, DEFAULT_USER_AGENT
from .cursor import Cursor
from .exceptions import (
    ApiError,
    ConfigurationError,
    ErrorStatus,
    HttpStatusError,
    OneLoginError,
    ResponseShapeError,
    TransportError,
)
from .transport import HttpTransport, REQUEST_TIMEOUT
from .apps import AppService
from .events import EventService
from .groups import GroupService
from .invites import InviteService
from .roles import RoleService
from .saml import SamlService
from .sessions import SessionService
from .users import UserService

__all__ = [
    # Client
    "ApiClient",
    "Result",
    "public_operation",
    "DEFAULT_USER_AGENT",
    "Cursor",
    "HttpTransport",
    "REQUEST_TIMEOUT",

    # Exceptions
    "ApiError",
    "ConfigurationError",
    "ErrorStatus",
    "HttpStatusError",
    "OneLoginError",
    "ResponseShapeError",
    "TransportError",

    # Services
    "AppService",
    "EventService",
    "GroupService",
    "InviteService",
    "RoleService",
    "SamlService",
    "SessionService",
    "UserService",
]
