"""Blocking HTTP transport used by the API client."""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

REQUEST_TIMEOUT = 5

logger = logging.getLogger(__name__)


class HttpTransport:
    """Thin wrapper around a ``requests.Session``.

    Redirects, TLS and connection pooling are left to ``requests``. Connectivity
    errors propagate as ``requests.RequestException``.
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def do_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> requests.Response:
        """Perform one HTTP request.

        Args:
            method: GET, POST, PUT or DELETE
            url: Absolute URL
            headers: Request headers
            params: Query parameters
            body: JSON-serialisable payload

        Returns:
            Response object
        """
        logger.debug(f"{method} {url} params={params}")
        return self.session.request(
            method,
            url,
            headers=headers,
            params=params,
            json=body,
            timeout=self.timeout,
        )

    def close(self) -> None:
        self.session.close()
