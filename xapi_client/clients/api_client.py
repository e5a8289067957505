"""
Authenticated access to the X API v2 and the v1.1 media upload endpoint.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from xapi_client.auth import Authentication, UserAccessTokens
from xapi_client.clients.http_client import HttpClient, HttpResponse
from xapi_client.exceptions import ApiResponseError, RateLimitExceeded
from xapi_client.rate_limit import RateLimitInfo

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.twitter.com"
MEDIA_UPLOAD_URL = "https://upload.twitter.com/1.1/media/upload.json"


class XApiClient:
    """Signs requests with the configured credentials and decodes responses."""

    def __init__(
        self,
        authentication: Authentication,
        *,
        http: HttpClient | None = None,
        base_url: str = API_BASE_URL,
        upload_url: str = MEDIA_UPLOAD_URL,
    ) -> None:
        self._authentication = authentication
        self._http = http or HttpClient()
        self.base_url = base_url.rstrip("/")
        self.upload_url = upload_url

    @property
    def authentication(self) -> Authentication:
        return self._authentication

    def call(
        self,
        route: str,
        *,
        method: str = "GET",
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Perform a single API request and return the decoded JSON body."""

        response = self._http.send(
            method,
            f"{self.base_url}{route}",
            auth=self._authentication.signer(),
            params=params,
            json_body=json_body,
        )
        self.raise_for_status(response)
        return response.json()

    def post_media(
        self,
        fields: Mapping[str, str],
        *,
        credentials: UserAccessTokens,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """POST form fields to the media upload endpoint; the status is left to the caller."""

        return self._http.send(
            "POST",
            self.upload_url,
            auth=credentials.signer(),
            data=fields,
            headers=headers,
        )

    @staticmethod
    def raise_for_status(response: HttpResponse) -> None:
        if response.ok:
            return

        message, code = _extract_error(response)
        if response.status_code == 429:
            reset_at = RateLimitInfo.from_headers(response.headers).reset_at
            logger.warning("Rate limit exceeded; resets at %s", reset_at)
            raise RateLimitExceeded(message, reset_at=reset_at)

        raise ApiResponseError(message, code=code, status_code=response.status_code)


def _extract_error(response: HttpResponse) -> tuple[str, int | None]:
    fallback = f"X API returned HTTP {response.status_code}."
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return fallback, None

    if not isinstance(payload, Mapping):
        return fallback, None

    errors = payload.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], Mapping):
        first = errors[0]
        code = first.get("code")
        message = first.get("message") or first.get("detail") or fallback
        return str(message), code if isinstance(code, int) else None

    detail = payload.get("detail") or payload.get("title") or payload.get("error")
    return (str(detail) if detail else fallback), None
