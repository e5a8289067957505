"""
Minimal HTTP transport on top of requests.Session.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import requests
from requests.auth import AuthBase

from xapi_client.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(slots=True)
class HttpResponse:
    """Raw outcome of a request: status, body bytes and headers."""

    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body; malformed JSON raises ``json.JSONDecodeError``."""
        if not self.content:
            return {}
        return json.loads(self.content)


class HttpClient:
    """Sends requests and converts transport failures into domain exceptions."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self.timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        *,
        auth: AuthBase | None = None,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method,
                url,
                auth=auth,
                params=params,
                data=data,
                json=json_body,
                headers=dict(headers) if headers else None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return HttpResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._session.close()
