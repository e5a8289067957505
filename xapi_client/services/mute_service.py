"""
Mute related workflows built on top of the API client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol

from xapi_client.exceptions import RangeOutOfBoundsError
from xapi_client.models import MutedUsersResponse, MuteResponse

MIN_MAX_RESULTS = 1
MAX_MAX_RESULTS = 1000


class MuteClient(Protocol):
    """Protocol subset consumed by the service."""

    def call(
        self,
        route: str,
        *,
        method: str = "GET",
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        ...


@dataclass(slots=True)
class MuteService:
    """Mute, unmute and list muted accounts."""

    client: MuteClient

    def get_muted_users(
        self,
        user_id: str,
        *,
        user_fields: Iterable[str] = (),
        tweet_fields: Iterable[str] = (),
        pagination_token: str | None = None,
        max_results: int = 100,
    ) -> MutedUsersResponse:
        """
        Return one page of users muted by ``user_id``.

        Equivalent to ``GET /2/users/:id/muting``. Requested tweet fields are
        delivered for pinned posts in ``includes.tweets``.

        Raises:
            RangeOutOfBoundsError: If ``max_results`` is outside 1..1000 (no request is sent)
        """
        if not MIN_MAX_RESULTS <= max_results <= MAX_MAX_RESULTS:
            raise RangeOutOfBoundsError(
                minimum=MIN_MAX_RESULTS,
                maximum=MAX_MAX_RESULTS,
                field_name="max_results",
                actual=max_results,
            )

        params: dict[str, str] = {"max_results": str(max_results)}
        if pagination_token:
            params["pagination_token"] = pagination_token

        user_fields = list(user_fields)
        tweet_fields = list(tweet_fields)
        if user_fields:
            params["user.fields"] = ",".join(user_fields)
        if tweet_fields:
            params["tweet.fields"] = ",".join(tweet_fields)
            params["expansions"] = "pinned_tweet_id"

        response = self.client.call(f"/2/users/{user_id}/muting", params=params)
        return MutedUsersResponse.from_api(response)

    def mute_user(self, source_user_id: str, target_user_id: str) -> MuteResponse:
        """Mute ``target_user_id`` on behalf of the authenticated ``source_user_id``."""
        response = self.client.call(
            f"/2/users/{source_user_id}/muting",
            method="POST",
            json_body={"target_user_id": target_user_id},
        )
        return MuteResponse.from_api(response)

    def unmute_user(self, source_user_id: str, target_user_id: str) -> MuteResponse:
        response = self.client.call(
            f"/2/users/{source_user_id}/muting/{target_user_id}",
            method="DELETE",
        )
        return MuteResponse.from_api(response)
