"""Interpretation of OneLogin response envelopes.

Two JSON envelope shapes are used by the API:

- status envelope: ``{"status": {"type", "message"}, "data": [...]}``
- paginated envelope: the status envelope plus ``{"pagination": {"after_cursor"}}``

The legacy embed-apps endpoint answers with XML (``/apps/app`` elements).
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional
from xml.etree import ElementTree

import requests

from .constants import SESSION_MFA_MESSAGE, SESSION_SUCCESS_MESSAGE
from .exceptions import ResponseShapeError
from .models import MFA, EmbedApp, SAMLEndpointResponse, SessionTokenInfo, SessionTokenMFAInfo

logger = logging.getLogger(__name__)

EMBED_APP_FIELDS = ("id", "icon", "name", "provisioned", "extension_required", "personal", "login_id")


def parse_json(response: requests.Response) -> Optional[Dict[str, Any]]:
    """Decode a JSON object body, or return None if it is not one."""
    try:
        content = response.json()
    except ValueError:
        return None
    return content if isinstance(content, dict) else None


def extract_error_message(response: requests.Response) -> str:
    """Best-effort message from ``status.message`` or ``status.type``."""
    content = parse_json(response)
    if not content:
        return ""
    status = content.get("status")
    if not isinstance(status, dict):
        return ""
    if status.get("message"):
        return str(status["message"])
    if status.get("type"):
        return str(status["type"])
    return ""


def get_after_cursor(content: Dict[str, Any]) -> Optional[str]:
    pagination = content.get("pagination")
    if isinstance(pagination, dict):
        return pagination.get("after_cursor") or None
    return None


def get_before_cursor(content: Dict[str, Any]) -> Optional[str]:
    pagination = content.get("pagination")
    if isinstance(pagination, dict):
        return pagination.get("before_cursor") or None
    return None


def require_data(content: Optional[Dict[str, Any]], endpoint: str = "") -> List[Any]:
    """Return the envelope's ``data`` list or raise ResponseShapeError."""
    if not content or "data" not in content:
        raise ResponseShapeError("response has no 'data' field", endpoint)
    data = content["data"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseShapeError("'data' field is not a list", endpoint)
    return data


def first_data_item(response: requests.Response, endpoint: str = "") -> Any:
    data = require_data(parse_json(response), endpoint)
    if not data:
        raise ResponseShapeError("'data' field is empty", endpoint)
    return data[0]


def handle_operation_response(response: requests.Response) -> bool:
    """Return True only for a well-formed envelope with ``status.type == "success"``.

    Malformed bodies are treated as False.
    """
    content = parse_json(response)
    if not content:
        return False
    status = content.get("status")
    return isinstance(status, dict) and status.get("type") == "success"


def handle_session_token_response(response: requests.Response, endpoint: str = ""):
    """Build a SessionTokenInfo or SessionTokenMFAInfo from a session-token envelope.

    Raises:
        ResponseShapeError: If the envelope is incomplete or the status message is unknown
    """
    content = parse_json(response)
    status = content.get("status") if content else None
    if not isinstance(status, dict) or "message" not in status:
        raise ResponseShapeError("session token response has no status message", endpoint)

    data = require_data(content, endpoint)
    message = status["message"]
    if message == SESSION_SUCCESS_MESSAGE:
        return SessionTokenInfo.from_dict(data[0] if data else {})
    if message == SESSION_MFA_MESSAGE:
        return SessionTokenMFAInfo.from_dict(data[0] if data else {})
    raise ResponseShapeError(f"Status Message type not recognized: {message}", endpoint)


def handle_saml_endpoint_response(response: requests.Response, endpoint: str = "") -> SAMLEndpointResponse:
    content = parse_json(response)
    status = content.get("status") if content else None
    if not isinstance(status, dict) or "message" not in status or "type" not in status:
        raise ResponseShapeError("SAML response has no status type/message", endpoint)
    if "data" not in content:
        raise ResponseShapeError("response has no 'data' field", endpoint)

    data = content["data"]
    if status["message"] == SESSION_SUCCESS_MESSAGE:
        return SAMLEndpointResponse(type=status["type"], message=status["message"], saml_response=data)

    if not isinstance(data, list) or not data:
        raise ResponseShapeError("SAML MFA response has no challenge data", endpoint)
    return SAMLEndpointResponse(type=status["type"], message=status["message"], mfa=MFA.from_dict(data[0]))


def retrieve_apps_from_xml(xml_content: str, endpoint: str = "") -> List[EmbedApp]:
    """Parse ``/apps/app`` elements, keeping only the known child fields."""
    try:
        root = ElementTree.fromstring(xml_content)
    except ElementTree.ParseError as e:
        raise ResponseShapeError(f"invalid embed apps XML: {e}", endpoint) from e

    if root.tag != "apps":
        raise ResponseShapeError(f"unexpected XML root element '{root.tag}'", endpoint)

    apps = []
    for node in root.findall("app"):
        app_data = {}
        for child in node:
            if child.tag in EMBED_APP_FIELDS:
                app_data[child.tag] = (child.text or "").strip()
        apps.append(EmbedApp.from_dict(app_data))
    logger.debug(f"Parsed {len(apps)} embed app(s)")
    return apps
