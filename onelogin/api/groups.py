"""OneLogin group operations."""
from __future__ import annotations
from typing import Any, Dict, Optional

from .client import ApiClient, public_operation
from .constants import GET_GROUP_URL, GET_GROUPS_URL
from .cursor import Cursor
from .models import Group


class GroupService:
    """Service for reading OneLogin groups."""

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation()
    def get_groups(self, params: Optional[Dict[str, Any]] = None) -> Cursor[Group]:
        return Cursor(self.client, self.client.get_url(GET_GROUPS_URL), Group.from_dict, params=params)

    def get_group(self, group_id: int) -> Optional[Group]:
        return self.client.fetch_one("GET", self.client.get_url(GET_GROUP_URL, group_id), Group.from_dict)
