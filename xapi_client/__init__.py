"""
Client library for the X (Twitter) REST API.
"""

from xapi_client.auth import (
    AppOnlyAuth,
    AuthenticationType,
    ClientCredentials,
    UserAccessTokens,
    UserCredentials,
)
from xapi_client.clients.api_client import XApiClient
from xapi_client.config import ConfigManager, XCredentials
from xapi_client.factory import XClientFactory
from xapi_client.models import MediaUploadResult, MimeType
from xapi_client.services.media_service import MediaService
from xapi_client.services.mute_service import MuteService
from xapi_client.services.post_service import PostService

__all__ = [
    "AppOnlyAuth",
    "AuthenticationType",
    "ClientCredentials",
    "ConfigManager",
    "MediaService",
    "MediaUploadResult",
    "MimeType",
    "MuteService",
    "PostService",
    "UserAccessTokens",
    "UserCredentials",
    "XApiClient",
    "XClientFactory",
    "XCredentials",
]
