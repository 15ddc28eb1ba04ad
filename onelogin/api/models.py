"""Immutable resource records built from decoded API payloads.

Each record is a frozen dataclass with a ``from_dict`` constructor that takes
one decoded JSON object. Unknown keys are ignored and missing keys default to
``None``. Records never hold a reference back to the client.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as ``2015-11-11T03:36:18.714Z``.

    Returns an aware UTC datetime, or None if the value is absent or unparsable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif not value or not isinstance(value, str):
        return None
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_bool(value: Any) -> Optional[bool]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class OneLoginToken:
    """OAuth 2.0 token issued by ``/auth/oauth2/token``."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    created_at: Optional[datetime] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    account_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OneLoginToken":
        return cls(
            access_token=data.get("access_token"),
            refresh_token=data.get("refresh_token"),
            created_at=_parse_datetime(data.get("created_at")),
            expires_in=_to_int(data.get("expires_in")),
            token_type=data.get("token_type"),
            account_id=_to_int(data.get("account_id")),
        )


@dataclass(frozen=True)
class RateLimit:
    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RateLimit":
        return cls(
            limit=_to_int(data.get("X-RateLimit-Limit")),
            remaining=_to_int(data.get("X-RateLimit-Remaining")),
            reset=_to_int(data.get("X-RateLimit-Reset")),
        )


@dataclass(frozen=True)
class User:
    """OneLogin user resource."""

    id: Optional[int] = None
    external_id: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    distinguished_name: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    department: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    state: Optional[int] = None
    member_of: Optional[str] = None
    samaccountname: Optional[str] = None
    userprincipalname: Optional[str] = None
    group_id: Optional[int] = None
    role_ids: Tuple[int, ...] = ()
    custom_attributes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    openid_name: Optional[str] = None
    locale_code: Optional[str] = None
    comment: Optional[str] = None
    directory_id: Optional[int] = None
    manager_ad_id: Optional[str] = None
    trusted_idp_id: Optional[int] = None
    invalid_login_attempts: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    activated_at: Optional[datetime] = None
    last_login: Optional[datetime] = None
    invitation_sent_at: Optional[datetime] = None
    locked_until: Optional[datetime] = None
    password_changed_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=_to_int(data.get("id")),
            external_id=data.get("external_id"),
            email=data.get("email"),
            username=data.get("username"),
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
            distinguished_name=data.get("distinguished_name"),
            phone=data.get("phone"),
            company=data.get("company"),
            department=data.get("department"),
            title=data.get("title"),
            status=_to_int(data.get("status")),
            state=_to_int(data.get("state")),
            member_of=data.get("member_of"),
            samaccountname=data.get("samaccountname"),
            userprincipalname=data.get("userprincipalname"),
            group_id=_to_int(data.get("group_id")),
            role_ids=tuple(data.get("role_id") or ()),
            custom_attributes=MappingProxyType(dict(data.get("custom_attributes") or {})),
            openid_name=data.get("openid_name"),
            locale_code=data.get("locale_code"),
            comment=data.get("comment"),
            directory_id=_to_int(data.get("directory_id")),
            manager_ad_id=data.get("manager_ad_id"),
            trusted_idp_id=_to_int(data.get("trusted_idp_id")),
            invalid_login_attempts=_to_int(data.get("invalid_login_attempts")),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
            activated_at=_parse_datetime(data.get("activated_at")),
            last_login=_parse_datetime(data.get("last_login")),
            invitation_sent_at=_parse_datetime(data.get("invitation_sent_at")),
            locked_until=_parse_datetime(data.get("locked_until")),
            password_changed_at=_parse_datetime(data.get("password_changed_at")),
        )


@dataclass(frozen=True)
class App:
    """App assigned to a user (``/api/1/users/{id}/apps``)."""

    id: Optional[int] = None
    name: Optional[str] = None
    icon: Optional[str] = None
    provisioned: Optional[bool] = None
    extension: Optional[bool] = None
    login_id: Optional[int] = None
    personal: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "App":
        return cls(
            id=_to_int(data.get("id")),
            name=data.get("name"),
            icon=data.get("icon"),
            provisioned=_to_bool(data.get("provisioned")),
            extension=_to_bool(data.get("extension")),
            login_id=_to_int(data.get("login_id")),
            personal=_to_bool(data.get("personal")),
        )


@dataclass(frozen=True)
class EmbedApp:
    """App returned by the XML embed endpoint; all fields come from element text."""

    id: Optional[int] = None
    name: Optional[str] = None
    icon: Optional[str] = None
    provisioned: Optional[bool] = None
    extension_required: Optional[bool] = None
    personal: Optional[bool] = None
    login_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmbedApp":
        return cls(
            id=_to_int(data.get("id")),
            name=data.get("name"),
            icon=data.get("icon"),
            provisioned=_to_bool(data.get("provisioned")),
            extension_required=_to_bool(data.get("extension_required")),
            personal=_to_bool(data.get("personal")),
            login_id=_to_int(data.get("login_id")),
        )


@dataclass(frozen=True)
class Role:
    id: Optional[int] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Role":
        return cls(id=_to_int(data.get("id")), name=data.get("name"))


@dataclass(frozen=True)
class Group:
    id: Optional[int] = None
    name: Optional[str] = None
    reference: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        return cls(
            id=_to_int(data.get("id")),
            name=data.get("name"),
            reference=data.get("reference"),
        )


@dataclass(frozen=True)
class EventType:
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventType":
        return cls(
            id=_to_int(data.get("id")),
            name=data.get("name"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Event:
    """Audit event from ``/api/1/events``."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    account_id: Optional[int] = None
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    event_type_id: Optional[int] = None
    notes: Optional[str] = None
    ipaddr: Optional[str] = None
    actor_user_id: Optional[int] = None
    actor_user_name: Optional[str] = None
    assuming_acting_user_id: Optional[int] = None
    role_id: Optional[int] = None
    role_name: Optional[str] = None
    app_id: Optional[int] = None
    group_id: Optional[int] = None
    group_name: Optional[str] = None
    otp_device_id: Optional[int] = None
    otp_device_name: Optional[str] = None
    policy_id: Optional[int] = None
    policy_name: Optional[str] = None
    actor_system: Optional[str] = None
    custom_message: Optional[str] = None
    operation_name: Optional[str] = None
    directory_sync_run_id: Optional[int] = None
    directory_id: Optional[int] = None
    resolution: Optional[str] = None
    client_id: Optional[int] = None
    resource_type_id: Optional[int] = None
    error_description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        return cls(
            id=_to_int(data.get("id")),
            created_at=_parse_datetime(data.get("created_at")),
            account_id=_to_int(data.get("account_id")),
            user_id=_to_int(data.get("user_id")),
            user_name=data.get("user_name"),
            event_type_id=_to_int(data.get("event_type_id")),
            notes=data.get("notes"),
            ipaddr=data.get("ipaddr"),
            actor_user_id=_to_int(data.get("actor_user_id")),
            actor_user_name=data.get("actor_user_name"),
            assuming_acting_user_id=_to_int(data.get("assuming_acting_user_id")),
            role_id=_to_int(data.get("role_id")),
            role_name=data.get("role_name"),
            app_id=_to_int(data.get("app_id")),
            group_id=_to_int(data.get("group_id")),
            group_name=data.get("group_name"),
            otp_device_id=_to_int(data.get("otp_device_id")),
            otp_device_name=data.get("otp_device_name"),
            policy_id=_to_int(data.get("policy_id")),
            policy_name=data.get("policy_name"),
            actor_system=data.get("actor_system"),
            custom_message=data.get("custom_message"),
            operation_name=data.get("operation_name"),
            directory_sync_run_id=_to_int(data.get("directory_sync_run_id")),
            directory_id=_to_int(data.get("directory_id")),
            resolution=data.get("resolution"),
            client_id=_to_int(data.get("client_id")),
            resource_type_id=_to_int(data.get("resource_type_id")),
            error_description=data.get("error_description"),
        )


@dataclass(frozen=True)
class Device:
    """MFA device a user can verify with."""

    id: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Device":
        device_id = data.get("device_id")
        return cls(
            id=str(device_id) if device_id is not None else None,
            type=data.get("device_type"),
        )


def _devices(data: Dict[str, Any]) -> Tuple[Device, ...]:
    return tuple(Device.from_dict(device) for device in data.get("devices") or [])


@dataclass(frozen=True)
class MFA:
    """MFA challenge returned by the SAML assertion endpoint."""

    state_token: Optional[str] = None
    callback_url: Optional[str] = None
    devices: Tuple[Device, ...] = ()
    user: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MFA":
        return cls(
            state_token=data.get("state_token"),
            callback_url=data.get("callback_url"),
            devices=_devices(data),
            user=dict(data.get("user") or {}),
        )


@dataclass(frozen=True)
class SessionTokenInfo:
    """Session login token issued when no MFA is required."""

    status: Optional[str] = None
    user: Dict[str, Any] = field(default_factory=dict)
    return_to_url: Optional[str] = None
    expires_at: Optional[datetime] = None
    session_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionTokenInfo":
        return cls(
            status=data.get("status"),
            user=dict(data.get("user") or {}),
            return_to_url=data.get("return_to_url"),
            expires_at=_parse_datetime(data.get("expires_at")),
            session_token=data.get("session_token"),
        )


@dataclass(frozen=True)
class SessionTokenMFAInfo:
    """MFA challenge returned instead of a session token.

    ``state_token`` and one of ``devices`` are needed for the verify-factor call.
    """

    user: Dict[str, Any] = field(default_factory=dict)
    state_token: Optional[str] = None
    callback_url: Optional[str] = None
    devices: Tuple[Device, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionTokenMFAInfo":
        return cls(
            user=dict(data.get("user") or {}),
            state_token=data.get("state_token"),
            callback_url=data.get("callback_url"),
            devices=_devices(data),
        )


@dataclass(frozen=True)
class SAMLEndpointResponse:
    """Result of a SAML assertion request: either an assertion or an MFA challenge."""

    type: Optional[str] = None
    message: Optional[str] = None
    saml_response: Optional[str] = None
    mfa: Optional[MFA] = None


__all__: List[str] = [
    "OneLoginToken",
    "RateLimit",
    "User",
    "App",
    "EmbedApp",
    "Role",
    "Group",
    "EventType",
    "Event",
    "Device",
    "MFA",
    "SessionTokenInfo",
    "SessionTokenMFAInfo",
    "SAMLEndpointResponse",
]
