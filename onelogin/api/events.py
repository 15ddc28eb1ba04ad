"""OneLogin event operations."""
from __future__ import annotations
from typing import Any, Dict, Optional

from .client import ApiClient, public_operation
from .constants import CREATE_EVENT_URL, GET_EVENT_TYPES_URL, GET_EVENT_URL, GET_EVENTS_URL
from .cursor import Cursor
from .models import Event, EventType


class EventService:
    """Service for OneLogin events and event types."""

    def __init__(self, client: ApiClient):
        self.client = client

    @public_operation()
    def get_event_types(self) -> Cursor[EventType]:
        """Return a lazy cursor over every event type known to the Events API."""
        return Cursor(self.client, self.client.get_url(GET_EVENT_TYPES_URL), EventType.from_dict)

    @public_operation()
    def get_events(self, params: Optional[Dict[str, Any]] = None) -> Cursor[Event]:
        """Return a lazy cursor over events.

        Args:
            params: Filters (client_id, directory_id, event_type_id, resolution,
                since, until, user_id) and optional limit
        """
        return Cursor(self.client, self.client.get_url(GET_EVENTS_URL), Event.from_dict, params=params)

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.client.fetch_one("GET", self.client.get_url(GET_EVENT_URL, event_id), Event.from_dict)

    def create_event(self, event_params: Dict[str, Any]) -> bool:
        """Create an event in the account.

        Args:
            event_params: Event data (event_type_id, account_id, actor_system,
                actor_user_id, actor_user_name, app_id, assuming_acting_user_id,
                custom_message, directory_sync_run_id, group_id, group_name, ipaddr,
                otp_device_id, otp_device_name, policy_id, policy_name, role_id,
                role_name, user_id, user_name)
        """
        return self.client.perform_boolean_op("POST", self.client.get_url(CREATE_EVENT_URL), body=event_params)
