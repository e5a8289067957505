"""
Credential modes accepted by the X API and the request signers for each.

An ``Authentication`` value is either app-only (a bearer token) or a user
context (consumer key pair plus the user's access token pair). Values are
frozen so a single client can be shared across concurrent uploads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

import tweepy
from requests.auth import AuthBase


class AuthenticationType(str, Enum):
    APP_ONLY = "app_only"
    USER_ACCESS_TOKENS = "user_access_tokens"


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    """Consumer (API) key pair identifying the application."""

    key: str
    secret: str


@dataclass(frozen=True, slots=True)
class UserCredentials:
    """Access token pair identifying the user the app acts for."""

    key: str
    secret: str


@dataclass(frozen=True, slots=True)
class AppOnlyAuth:
    """OAuth 2.0 app-only authentication."""

    bearer_token: str

    @property
    def authentication_type(self) -> AuthenticationType:
        return AuthenticationType.APP_ONLY

    def signer(self) -> AuthBase:
        return tweepy.OAuth2BearerHandler(self.bearer_token)


@dataclass(frozen=True, slots=True)
class UserAccessTokens:
    """OAuth 1.0a user context authentication."""

    client_credentials: ClientCredentials
    user_credentials: UserCredentials

    @property
    def authentication_type(self) -> AuthenticationType:
        return AuthenticationType.USER_ACCESS_TOKENS

    def signer(self) -> AuthBase:
        """Return an OAuth1 signer that also covers form-encoded body fields."""
        handler = tweepy.OAuth1UserHandler(
            self.client_credentials.key,
            self.client_credentials.secret,
            self.user_credentials.key,
            self.user_credentials.secret,
        )
        return handler.apply_auth()


Authentication = Union[AppOnlyAuth, UserAccessTokens]
