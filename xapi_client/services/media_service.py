"""
Media upload workflows wrapping X's chunked upload process.

An upload is three strictly sequential phases against the v1.1 media
endpoint: INIT allocates the remote media object, APPEND sends the payload
as base64 segments in order, and FINALIZE closes the upload. Nothing is
retried; the first failure aborts the upload and the remote object is left
to expire on its own.
"""

from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Protocol

from xapi_client.auth import Authentication, AuthenticationType, UserAccessTokens
from xapi_client.clients.http_client import HttpResponse
from xapi_client.exceptions import (
    MediaValidationError,
    OAuthTokenError,
    UnknownError,
    WrongAuthenticationType,
)
from xapi_client.models import MediaInitResponse, MediaUploadResult, MimeType
from xapi_client.utils.chunking import MAX_CHUNK_SIZE, count_chunks, encode_chunks

logger = logging.getLogger(__name__)

IMAGE_MAX_BYTES = 5 * 1024 * 1024
GIF_MAX_BYTES = 15 * 1024 * 1024
VIDEO_MAX_BYTES = 512 * 1024 * 1024


class MediaClient(Protocol):
    """Protocol capturing the media upload behaviour of the API client."""

    @property
    def authentication(self) -> Authentication:
        ...

    def post_media(
        self,
        fields: Mapping[str, str],
        *,
        credentials: UserAccessTokens,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        ...

    def raise_for_status(self, response: HttpResponse) -> None:
        ...


@dataclass(slots=True)
class MediaUploadSession:
    """State carried from INIT through the APPEND segments to FINALIZE."""

    media_id: int
    media_id_string: str
    total_bytes: int
    segment_count: int
    chunks: Iterator[str]
    expires_after_secs: int


@dataclass(slots=True)
class MediaService:
    """Chunked media upload orchestration."""

    client: MediaClient
    chunk_size: int = MAX_CHUNK_SIZE

    def upload(self, data: bytes, mime_type: MimeType | str) -> MediaUploadResult:
        """
        Upload an in-memory payload and return the finalized media handle.

        Args:
            data: Complete media payload
            mime_type: MIME type of the payload, e.g. ``MimeType.MP4`` or "image/png"

        Returns:
            MediaUploadResult whose ``media_id_string`` can be attached to a post.
            When ``processing_info`` is present the media must be polled for
            status before use.

        Raises:
            MediaValidationError: If the payload is empty or the MIME type unsupported
            WrongAuthenticationType: If the client is not in user context (no I/O is done)
            OAuthTokenError: If user context is lost between phases
            UnknownError: If a segment is rejected; later segments are not sent
            ApiResponseError: If INIT or FINALIZE is rejected
        """
        if not data:
            raise MediaValidationError("Cannot upload an empty media payload.")
        media_type = self._resolve_mime_type(mime_type)

        session = self._initialize(data, media_type)
        self._append_chunks(session)
        return self._finalize(session)

    def upload_file(self, path: Path, *, mime_type: MimeType | str | None = None) -> MediaUploadResult:
        """
        Read a media file into memory and upload it.

        The MIME type is guessed from the file name unless given explicitly.

        Raises:
            MediaValidationError: If the file is missing, unsupported or too large
        """
        path = self._validate_path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
            if mime_type is None:
                raise MediaValidationError(f"Cannot determine the MIME type of '{path.name}'.")
        media_type = self._resolve_mime_type(mime_type)
        self._validate_size(path, media_type)
        return self.upload(path.read_bytes(), media_type)

    def _initialize(self, data: bytes, mime_type: MimeType) -> MediaUploadSession:
        credentials = self.client.authentication
        if not isinstance(credentials, UserAccessTokens):
            raise WrongAuthenticationType(needs=AuthenticationType.USER_ACCESS_TOKENS)

        fields = {
            "command": "INIT",
            "media_category": mime_type.media_category,
            "media_type": mime_type.value,
            "total_bytes": str(len(data)),
        }
        response = self.client.post_media(fields, credentials=credentials)
        self.client.raise_for_status(response)
        init = MediaInitResponse.from_api(response.json())

        segment_count = count_chunks(len(data), chunk_size=self.chunk_size)
        logger.debug(
            "INIT media %s: %d bytes in %d segment(s)",
            init.media_id_string,
            len(data),
            segment_count,
        )
        return MediaUploadSession(
            media_id=init.media_id,
            media_id_string=init.media_id_string,
            total_bytes=len(data),
            segment_count=segment_count,
            chunks=encode_chunks(data, chunk_size=self.chunk_size),
            expires_after_secs=init.expires_after_secs,
        )

    def _append_chunks(self, session: MediaUploadSession) -> None:
        credentials = self._require_user_tokens()

        for segment_index, chunk in enumerate(session.chunks):
            fields = {
                "command": "APPEND",
                "media_id": session.media_id_string,
                "media_data": chunk,
                "segment_index": str(segment_index),
            }
            response = self.client.post_media(
                fields,
                credentials=credentials,
                headers={"Content-Transfer-Encoding": "base64"},
            )
            if not response.ok:
                raise UnknownError(
                    f"Appending segment {segment_index} of media "
                    f"{session.media_id_string} failed with HTTP {response.status_code}.",
                    status_code=response.status_code,
                )
            logger.debug(
                "APPEND media %s segment %d/%d",
                session.media_id_string,
                segment_index + 1,
                session.segment_count,
            )

    def _finalize(self, session: MediaUploadSession) -> MediaUploadResult:
        credentials = self._require_user_tokens()

        fields = {
            "command": "FINALIZE",
            "media_id": session.media_id_string,
        }
        response = self.client.post_media(fields, credentials=credentials)
        self.client.raise_for_status(response)
        result = MediaUploadResult.from_api(response.json())
        logger.info("Uploaded media %s (%d bytes)", result.media_id_string, session.total_bytes)
        return result

    def _require_user_tokens(self) -> UserAccessTokens:
        credentials = self.client.authentication
        if not isinstance(credentials, UserAccessTokens):
            raise OAuthTokenError()
        return credentials

    @staticmethod
    def _resolve_mime_type(mime_type: MimeType | str) -> MimeType:
        try:
            return MimeType(mime_type)
        except ValueError as exc:
            raise MediaValidationError(f"Unsupported media MIME type '{mime_type}'.") from exc

    @staticmethod
    def _validate_path(path: Path) -> Path:
        resolved = path.expanduser()
        if not resolved.exists() or not resolved.is_file():
            raise MediaValidationError(f"Media file '{path}' does not exist or is not a file.")
        return resolved

    @staticmethod
    def _validate_size(path: Path, mime_type: MimeType) -> None:
        if mime_type is MimeType.GIF:
            limit = GIF_MAX_BYTES
        elif mime_type.media_category == "tweet_video":
            limit = VIDEO_MAX_BYTES
        else:
            limit = IMAGE_MAX_BYTES

        size = path.stat().st_size
        if size > limit:
            raise MediaValidationError(f"Media '{path}' exceeds the {limit} byte size limit.")
