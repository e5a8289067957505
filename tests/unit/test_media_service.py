from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Any, Mapping

import pytest

from xapi_client.auth import (
    AppOnlyAuth,
    AuthenticationType,
    ClientCredentials,
    UserAccessTokens,
    UserCredentials,
)
from xapi_client.clients.api_client import XApiClient
from xapi_client.clients.http_client import HttpResponse
from xapi_client.exceptions import (
    ApiResponseError,
    MediaValidationError,
    OAuthTokenError,
    UnknownError,
    WrongAuthenticationType,
)
from xapi_client.models import MimeType
from xapi_client.services.media_service import IMAGE_MAX_BYTES, MediaService

USER_AUTH = UserAccessTokens(
    client_credentials=ClientCredentials("consumer-key", "consumer-secret"),
    user_credentials=UserCredentials("access-token", "access-secret"),
)

INIT_RESPONSE = {
    "media_id": 710511363345354753,
    "media_id_string": "710511363345354753",
    "expires_after_secs": 86399,
}

FINALIZE_RESPONSE = {
    "media_id": 710511363345354753,
    "media_id_string": "710511363345354753",
    "size": 10_000_000,
    "expires_after_secs": 86400,
}


def _json_response(status: int, payload: Any) -> HttpResponse:
    return HttpResponse(status_code=status, content=json.dumps(payload).encode())


class FakeMediaClient:
    def __init__(
        self,
        authentication=USER_AUTH,
        *,
        init_response: HttpResponse | None = None,
        finalize_response: HttpResponse | None = None,
        append_statuses: Mapping[int, int] | None = None,
    ) -> None:
        self.authentication = authentication
        self.init_response = init_response or _json_response(202, INIT_RESPONSE)
        self.finalize_response = finalize_response or _json_response(201, FINALIZE_RESPONSE)
        self.append_statuses = dict(append_statuses or {})
        self.calls: list[dict[str, Any]] = []
        self.after_init = None

    def post_media(self, fields, *, credentials, headers=None):
        self.calls.append(
            {"fields": dict(fields), "credentials": credentials, "headers": dict(headers or {})}
        )
        command = fields["command"]
        if command == "INIT":
            if self.after_init:
                self.after_init()
            return self.init_response
        if command == "APPEND":
            return HttpResponse(self.append_statuses.get(int(fields["segment_index"]), 204))
        if command == "FINALIZE":
            return self.finalize_response
        raise AssertionError(f"Unexpected command {command}")

    def raise_for_status(self, response: HttpResponse) -> None:
        XApiClient.raise_for_status(response)

    def commands(self) -> list[str]:
        return [call["fields"]["command"] for call in self.calls]

    def appends(self) -> list[dict[str, Any]]:
        return [call for call in self.calls if call["fields"]["command"] == "APPEND"]


def test_upload_runs_init_append_finalize_in_order() -> None:
    data = bytes(range(256)) * 39_062 + b"\x00" * 128  # 10,000,000 bytes
    client = FakeMediaClient()
    service = MediaService(client)

    result = service.upload(data, MimeType.MP4)

    assert client.commands() == ["INIT", "APPEND", "APPEND", "APPEND", "FINALIZE"]
    init_fields = client.calls[0]["fields"]
    assert init_fields == {
        "command": "INIT",
        "media_category": "tweet_video",
        "media_type": "video/mp4",
        "total_bytes": "10000000",
    }

    appends = client.appends()
    assert [call["fields"]["segment_index"] for call in appends] == ["0", "1", "2"]
    assert all(call["fields"]["media_id"] == "710511363345354753" for call in appends)
    assert all(call["headers"] == {"Content-Transfer-Encoding": "base64"} for call in appends)
    decoded = [base64.b64decode(call["fields"]["media_data"]) for call in appends]
    assert [len(segment) for segment in decoded] == [4_096_000, 4_096_000, 1_808_000]
    assert b"".join(decoded) == data

    assert client.calls[-1]["fields"] == {"command": "FINALIZE", "media_id": "710511363345354753"}
    assert all(call["credentials"] is USER_AUTH for call in client.calls)

    assert result.media_id == 710511363345354753
    assert result.media_id_string == INIT_RESPONSE["media_id_string"]
    assert result.size_bytes == 10_000_000
    assert result.processing_info is None


def test_failed_segment_stops_upload_immediately() -> None:
    client = FakeMediaClient(append_statuses={1: 500})
    service = MediaService(client, chunk_size=10)

    with pytest.raises(UnknownError) as exc:
        service.upload(b"x" * 40, "image/png")

    assert exc.value.status_code == 500
    assert [call["fields"]["segment_index"] for call in client.appends()] == ["0", "1"]
    assert "FINALIZE" not in client.commands()


def test_app_only_authentication_fails_before_any_request() -> None:
    client = FakeMediaClient(authentication=AppOnlyAuth("bearer"))
    service = MediaService(client)

    with pytest.raises(WrongAuthenticationType) as exc:
        service.upload(b"payload", MimeType.PNG)

    assert exc.value.needs is AuthenticationType.USER_ACCESS_TOKENS
    assert client.calls == []


def test_losing_user_context_after_init_raises_oauth_token_error() -> None:
    client = FakeMediaClient()

    def switch_to_app_only() -> None:
        client.authentication = AppOnlyAuth("bearer")

    client.after_init = switch_to_app_only
    service = MediaService(client)

    with pytest.raises(OAuthTokenError):
        service.upload(b"payload", MimeType.JPEG)

    assert client.commands() == ["INIT"]


def test_empty_payload_is_rejected_without_requests() -> None:
    client = FakeMediaClient()
    service = MediaService(client)

    with pytest.raises(MediaValidationError):
        service.upload(b"", MimeType.PNG)

    assert client.calls == []


def test_unsupported_mime_type_is_rejected() -> None:
    client = FakeMediaClient()
    service = MediaService(client)

    with pytest.raises(MediaValidationError):
        service.upload(b"BM", "image/bmp")

    assert client.calls == []


def test_rejected_init_surfaces_api_error() -> None:
    client = FakeMediaClient(
        init_response=_json_response(401, {"errors": [{"code": 32, "message": "Could not authenticate you."}]})
    )
    service = MediaService(client)

    with pytest.raises(ApiResponseError) as exc:
        service.upload(b"payload", MimeType.PNG)

    assert exc.value.code == 32
    assert exc.value.status_code == 401
    assert client.commands() == ["INIT"]


def test_malformed_finalize_body_propagates_decode_error() -> None:
    client = FakeMediaClient(finalize_response=HttpResponse(200, b"<html>oops</html>"))
    service = MediaService(client)

    with pytest.raises(json.JSONDecodeError):
        service.upload(b"payload", MimeType.PNG)


def test_processing_info_is_returned_to_caller() -> None:
    finalize = dict(FINALIZE_RESPONSE, processing_info={"state": "pending", "check_after_secs": 5})
    client = FakeMediaClient(finalize_response=_json_response(200, finalize))
    service = MediaService(client)

    result = service.upload(b"\0" * 2048, MimeType.MP4)

    assert result.processing_info is not None
    assert result.processing_info.state == "pending"
    assert result.processing_info.check_after_secs == 5
    assert result.requires_processing is True


def test_upload_file_guesses_mime_type(tmp_path: Path) -> None:
    file_path = tmp_path / "image.png"
    file_path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\0" * 100)
    client = FakeMediaClient()
    service = MediaService(client)

    service.upload_file(file_path)

    init_fields = client.calls[0]["fields"]
    assert init_fields["media_type"] == "image/png"
    assert init_fields["media_category"] == "tweet_image"
    assert init_fields["total_bytes"] == "108"


def test_upload_file_routes_gif_to_gif_category(tmp_path: Path) -> None:
    file_path = tmp_path / "animation.gif"
    file_path.write_bytes(b"GIF89a" + b"\0" * 10)
    client = FakeMediaClient()

    MediaService(client).upload_file(file_path)

    assert client.calls[0]["fields"]["media_category"] == "tweet_gif"


def test_upload_file_rejects_large_images(tmp_path: Path) -> None:
    file_path = tmp_path / "big.png"
    file_path.write_bytes(b"\0" * (IMAGE_MAX_BYTES + 1))
    client = FakeMediaClient()

    with pytest.raises(MediaValidationError) as exc:
        MediaService(client).upload_file(file_path)

    assert "exceeds" in str(exc.value)
    assert client.calls == []


def test_upload_file_rejects_missing_file(tmp_path: Path) -> None:
    client = FakeMediaClient()

    with pytest.raises(MediaValidationError) as exc:
        MediaService(client).upload_file(tmp_path / "missing.mp4")

    assert "does not exist" in str(exc.value)


def test_upload_file_rejects_unknown_extension(tmp_path: Path) -> None:
    file_path = tmp_path / "notes.unknownext"
    file_path.write_bytes(b"data")

    with pytest.raises(MediaValidationError):
        MediaService(FakeMediaClient()).upload_file(file_path)
