"""OneLogin user management operations."""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from .client import ApiClient, public_operation
from .constants import (
    ADD_ROLE_TO_USER_URL,
    CREATE_USER_URL,
    DELETE_ROLE_TO_USER_URL,
    DELETE_USER_URL,
    GET_APPS_FOR_USER_URL,
    GET_CUSTOM_ATTRIBUTES_URL,
    GET_ROLES_FOR_USER_URL,
    GET_USER_URL,
    GET_USERS_URL,
    LOCK_USER_URL,
    LOG_USER_OUT_URL,
    SET_CUSTOM_ATTRIBUTE_TO_USER_URL,
    SET_PW_CLEARTEXT,
    SET_PW_SALT,
    UPDATE_USER_URL,
)
from .cursor import Cursor
from .models import App, User
from .responses import parse_json, require_data

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing OneLogin users."""

    def __init__(self, client: ApiClient):
        """Initialize user service.

        Args:
            client: OneLogin API client
        """
        self.client = client

    @public_operation()
    def get_users(self, params: Optional[Dict[str, Any]] = None) -> Cursor[User]:
        """Return a lazy cursor over users.

        Args:
            params: Filters (email, username, firstname, directory_id, ...) and
                optionally ``limit`` to cap the total number of users returned
        """
        return Cursor(self.client, self.client.get_url(GET_USERS_URL), User.from_dict, params=params)

    def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID, or None on failure."""
        return self.client.fetch_one("GET", self.client.get_url(GET_USER_URL, user_id), User.from_dict)

    @public_operation()
    def get_user_apps(self, user_id: int) -> Cursor[App]:
        """Return a lazy cursor over the apps accessible by a user (personal apps excluded)."""
        return Cursor(self.client, self.client.get_url(GET_APPS_FOR_USER_URL, user_id), App.from_dict)

    @public_operation(default_factory=list)
    def get_user_roles(self, user_id: int) -> List[int]:
        """Get the IDs of the roles assigned to a user."""
        url = self.client.get_url(GET_ROLES_FOR_USER_URL, user_id)
        resp = self.client.request("GET", url)
        data = require_data(parse_json(resp), url)
        return list(data[0] or []) if data else []

    @public_operation(default_factory=list)
    def get_custom_attributes(self) -> List[str]:
        """Get the names of the custom attribute fields defined for the account."""
        url = self.client.get_url(GET_CUSTOM_ATTRIBUTES_URL)
        resp = self.client.request("GET", url)
        data = require_data(parse_json(resp), url)
        return list(data[0] or []) if data else []

    def create_user(self, user_params: Dict[str, Any]) -> Optional[User]:
        """Create a user.

        Args:
            user_params: User data (firstname, lastname, email, username, company,
                department, directory_id, distinguished_name, external_id, group_id,
                locale_code, manager_ad_id, member_of, openid_name, phone,
                samaccountname, title, userprincipalname)

        Returns:
            The created user, or None on failure
        """
        return self.client.fetch_one("POST", self.client.get_url(CREATE_USER_URL), User.from_dict, body=user_params)

    def update_user(self, user_id: int, user_params: Dict[str, Any]) -> Optional[User]:
        """Update a user and return the modified representation."""
        url = self.client.get_url(UPDATE_USER_URL, user_id)
        return self.client.fetch_one("PUT", url, User.from_dict, body=user_params)

    def assign_role_to_user(self, user_id: int, role_ids: List[int]) -> bool:
        """Assign roles to a user.

        Args:
            user_id: User ID
            role_ids: Role IDs to add

        Returns:
            True if the roles were assigned
        """
        url = self.client.get_url(ADD_ROLE_TO_USER_URL, user_id)
        return self.client.perform_boolean_op("PUT", url, body={"role_id_array": list(role_ids)})

    def remove_role_from_user(self, user_id: int, role_ids: List[int]) -> bool:
        """Remove roles from a user."""
        url = self.client.get_url(DELETE_ROLE_TO_USER_URL, user_id)
        return self.client.perform_boolean_op("PUT", url, body={"role_id_array": list(role_ids)})

    def set_password_using_clear_text(
        self,
        user_id: int,
        password: str,
        password_confirmation: str,
        validate_policy: bool = False,
    ) -> bool:
        """Set a user's password from a clear text value.

        Args:
            user_id: User ID
            password: New password
            password_confirmation: Must match password
            validate_policy: Enforce the user's password policy
        """
        data = {
            "password": password,
            "password_confirmation": password_confirmation,
            "validate_policy": validate_policy,
        }
        return self.client.perform_boolean_op("PUT", self.client.get_url(SET_PW_CLEARTEXT, user_id), body=data)

    def set_password_using_hash_salt(
        self,
        user_id: int,
        password: str,
        password_confirmation: str,
        password_algorithm: str,
        password_salt: Optional[str] = None,
    ) -> bool:
        """Set a user's password from a pre-hashed value.

        Args:
            user_id: User ID
            password: Hashed password
            password_confirmation: Must match password
            password_algorithm: "salt+sha256", "sha256+salt" or "sha256"
            password_salt: Salt used for the hash
        """
        data = {
            "password": password,
            "password_confirmation": password_confirmation,
            "password_algorithm": password_algorithm,
        }
        if password_salt:
            data["password_salt"] = password_salt
        return self.client.perform_boolean_op("PUT", self.client.get_url(SET_PW_SALT, user_id), body=data)

    def set_custom_attribute_to_user(self, user_id: int, custom_attributes: Dict[str, Any]) -> bool:
        url = self.client.get_url(SET_CUSTOM_ATTRIBUTE_TO_USER_URL, user_id)
        return self.client.perform_boolean_op("PUT", url, body={"custom_attributes": custom_attributes})

    def log_user_out(self, user_id: int) -> bool:
        """Log a user out of any active sessions."""
        return self.client.perform_boolean_op("PUT", self.client.get_url(LOG_USER_OUT_URL, user_id))

    def lock_user(self, user_id: int, minutes: int) -> bool:
        """Lock a user's account for a number of minutes (0 delegates to the policy)."""
        url = self.client.get_url(LOCK_USER_URL, user_id)
        return self.client.perform_boolean_op("PUT", url, body={"locked_until": minutes})

    def delete_user(self, user_id: int) -> bool:
        result = self.client.perform_boolean_op("DELETE", self.client.get_url(DELETE_USER_URL, user_id))
        if result:
            logger.info(f"Deleted user {user_id}")
        return result
