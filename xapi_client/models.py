"""
Pydantic models for X (Twitter) API responses used by xapi_client.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


def _to_mapping(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if hasattr(payload, "data"):
        return _to_mapping(payload.data)
    if hasattr(payload, "__dict__"):
        return _to_mapping(vars(payload))
    raise TypeError(f"Cannot convert payload of type {type(payload)!r} to mapping.")


def _unwrap_data(payload: Any) -> Mapping[str, Any]:
    mapping = _to_mapping(payload)
    data = mapping.get("data")
    return data if isinstance(data, Mapping) else mapping


class MimeType(str, Enum):
    """MIME types accepted by the media upload endpoint."""

    JPEG = "image/jpeg"
    GIF = "image/gif"
    PNG = "image/png"
    WEBP = "image/webp"
    MP4 = "video/mp4"
    MOV = "video/quicktime"

    @property
    def media_category(self) -> str:
        if self is MimeType.GIF:
            return "tweet_gif"
        if self.value.startswith("video/"):
            return "tweet_video"
        return "tweet_image"


# ----------------------------------------------------------------------------
# Media
# ----------------------------------------------------------------------------


class MediaInitResponse(BaseModel):
    """Remote media object allocated by the INIT command."""

    media_id: int
    media_id_string: str
    expires_after_secs: int

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_api(cls, payload: Any) -> "MediaInitResponse":
        return cls.model_validate(_to_mapping(payload))


class MediaProcessingError(BaseModel):
    code: int | None = None
    name: str | None = None
    message: str | None = None


class MediaProcessingInfo(BaseModel):
    state: str
    check_after_secs: int | None = None
    progress_percent: int | None = None
    error: MediaProcessingError | None = None

    model_config = ConfigDict(extra="allow", frozen=True)


class MediaUploadResult(BaseModel):
    """Final metadata returned by the FINALIZE command."""

    media_id: int
    media_id_string: str
    size_bytes: int = Field(alias="size")
    expires_after_secs: int
    processing_info: MediaProcessingInfo | None = None

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    @classmethod
    def from_api(cls, payload: Any) -> "MediaUploadResult":
        return cls.model_validate(_to_mapping(payload))

    @property
    def requires_processing(self) -> bool:
        """True when the media must be polled for status before it can be attached."""
        return self.processing_info is not None and self.processing_info.state.lower() not in {
            "succeeded",
            "success",
        }


# ----------------------------------------------------------------------------
# Posts, users & mutes
# ----------------------------------------------------------------------------


class Post(BaseModel):
    """Normalized representation of a post."""

    id: str
    text: str | None = None
    author_id: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "Post":
        return cls.model_validate(_unwrap_data(payload))


class PostDeleteResult(BaseModel):
    """Represents the outcome of a delete post call."""

    deleted: bool

    @classmethod
    def from_api(cls, payload: Any) -> "PostDeleteResult":
        return cls.model_validate(_unwrap_data(payload))


class User(BaseModel):
    id: str
    name: str | None = None
    username: str | None = None
    pinned_tweet_id: str | None = None

    model_config = ConfigDict(extra="allow")


class UserIncludes(BaseModel):
    tweets: list[Post] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ResponseMeta(BaseModel):
    result_count: int | None = None
    next_token: str | None = None
    previous_token: str | None = None


class MutedUsersResponse(BaseModel):
    """One page of ``GET /2/users/:id/muting``."""

    data: list[User] = Field(default_factory=list)
    includes: UserIncludes | None = None
    meta: ResponseMeta | None = None

    @classmethod
    def from_api(cls, payload: Any) -> "MutedUsersResponse":
        return cls.model_validate(_to_mapping(payload))


class MuteResponse(BaseModel):
    """Whether the source user is muting the target as a result of the request."""

    muting: bool

    @classmethod
    def from_api(cls, payload: Any) -> "MuteResponse":
        return cls.model_validate(_unwrap_data(payload))
