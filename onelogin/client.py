"""OneLogin SDK entry point."""
from __future__ import annotations
from typing import Optional

from .api.apps import AppService
from .api.client import ApiClient
from .api.events import EventService
from .api.groups import GroupService
from .api.invites import InviteService
from .api.roles import RoleService
from .api.saml import SamlService
from .api.sessions import SessionService
from .api.transport import HttpTransport
from .api.users import UserService
from .config import ClientConfig, load_settings


class OneLoginClient(ApiClient):
    """API client with one service per resource.

    Usage:
        client = OneLoginClient("client-id", "client-secret", region="us")
        for user in client.users.get_users({"firstname": "Alice"}):
            print(user.email)
        if not client.users.assign_role_to_user(42, [7]):
            print(client.error, client.error_description)
    """

    def __init__(self, client_id: str, client_secret: str, region: Optional[str] = None, **kwargs):
        super().__init__(client_id, client_secret, region, **kwargs)
        self.users = UserService(self)
        self.roles = RoleService(self)
        self.groups = GroupService(self)
        self.events = EventService(self)
        self.sessions = SessionService(self)
        self.saml = SamlService(self)
        self.invites = InviteService(self)
        self.apps = AppService(self)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Optional[HttpTransport] = None) -> "OneLoginClient":
        return cls(
            config.client_id,
            config.client_secret,
            config.region,
            transport=transport,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    @classmethod
    def from_settings(cls) -> "OneLoginClient":
        """Build a client from ONELOGIN_* environment variables and /run/secrets."""
        return cls.from_config(load_settings())
