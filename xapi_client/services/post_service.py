"""
Post related workflows built on top of the API client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol

from xapi_client.exceptions import ApiResponseError
from xapi_client.models import Post, PostDeleteResult


class PostClient(Protocol):
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
class PostService:
    """High level orchestration for post CRUD operations."""

    client: PostClient

    def create_post(
        self,
        text: str,
        *,
        media_ids: Iterable[str] | None = None,
        in_reply_to: str | None = None,
        quote_post_id: str | None = None,
        reply_settings: str | None = None,
    ) -> Post:
        payload: dict[str, Any] = {"text": text}
        if media_ids:
            payload["media"] = {"media_ids": [str(media_id) for media_id in media_ids]}
        if in_reply_to:
            payload["reply"] = {"in_reply_to_tweet_id": in_reply_to}
        if quote_post_id:
            payload["quote_tweet_id"] = quote_post_id
        if reply_settings:
            payload["reply_settings"] = reply_settings
        response = self.client.call("/2/tweets", method="POST", json_body=payload)
        return Post.from_api(response)

    def delete_post(self, post_id: str) -> bool:
        response = self.client.call(f"/2/tweets/{post_id}", method="DELETE")
        result = PostDeleteResult.from_api(response)
        if not result.deleted:
            raise ApiResponseError(f"Unable to delete post '{post_id}'.")
        return True

    def get_post(self, post_id: str, *, post_fields: Iterable[str] = ()) -> Post:
        params = {}
        fields = list(post_fields)
        if fields:
            params["tweet.fields"] = ",".join(fields)
        response = self.client.call(f"/2/tweets/{post_id}", params=params or None)
        return Post.from_api(response)
