"""Mock responses for X API integration tests."""

from __future__ import annotations

# X API v1.1 media upload responses
MEDIA_UPLOAD_INIT_RESPONSE = {
    "media_id": 1455952740635586573,
    "media_id_string": "1455952740635586573",
    "expires_after_secs": 86400,
}

MEDIA_UPLOAD_FINALIZE_RESPONSE = {
    "media_id": 1455952740635586573,
    "media_id_string": "1455952740635586573",
    "size": 1024,
    "expires_after_secs": 86400,
}

MEDIA_UPLOAD_VIDEO_FINALIZE_RESPONSE = {
    "media_id": 1455952740635586573,
    "media_id_string": "1455952740635586573",
    "size": 1024,
    "expires_after_secs": 86400,
    "processing_info": {
        "state": "pending",
        "check_after_secs": 1,
    },
}

MEDIA_UPLOAD_AUTH_ERROR = {
    "errors": [
        {
            "code": 32,
            "message": "Could not authenticate you.",
        }
    ]
}

# X API v2 responses
POST_RESPONSE = {
    "data": {
        "id": "1234567890",
        "text": "Hello from integration test!",
        "edit_history_tweet_ids": ["1234567890"],
    }
}

MUTED_USERS_RESPONSE = {
    "data": [
        {
            "id": "2244994945",
            "name": "X Dev",
            "username": "XDevelopers",
        }
    ],
    "meta": {
        "result_count": 1,
        "next_token": "7140dibdnow9c7btw481s8m561gat797rboud5r80xvzm",
    },
}

MUTE_RESPONSE = {"data": {"muting": True}}

UNMUTE_RESPONSE = {"data": {"muting": False}}

RATE_LIMIT_ERROR_RESPONSE = {
    "title": "Too Many Requests",
    "detail": "Too Many Requests",
    "type": "about:blank",
    "status": 429,
}
