"""OneLogin role operations."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from .client import ApiClient, public_operation
from .constants import GET_ROLE_URL, GET_ROLES_URL
from .cursor import Cursor
from .models import Role

DEFAULT_ROLES_LIMIT = 50


class RoleService:
    """Service for reading OneLogin roles."""

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation(default_factory=list)
    def get_roles(self, params: Optional[Dict[str, Any]] = None, limit: Optional[int] = None) -> List[Role]:
        """Get roles, at most ``params["limit"]`` of them (50 when not given).

        Pages are fetched until the limit is reached or the server has no
        more pages. A limit above the server page size is enforced
        client-side only.

        Args:
            params: Filters (name, ...) and optional limit
            limit: Overrides params["limit"] when given

        Returns:
            Roles in server order. On a failed page fetch, the roles gathered
            so far; the error status says why it stopped.
        """
        params = dict(params or {})
        if limit is None:
            limit = params.get("limit")
        limit = DEFAULT_ROLES_LIMIT if limit is None else int(limit)
        cursor = Cursor(self.client, self.client.get_url(GET_ROLES_URL), Role.from_dict, params=params, limit=limit)
        return cursor.take_all()

    def get_role(self, role_id: int) -> Optional[Role]:
        return self.client.fetch_one("GET", self.client.get_url(GET_ROLE_URL, role_id), Role.from_dict)
