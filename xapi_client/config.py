"""
Configuration management utilities for xapi_client.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values

from xapi_client.auth import (
    AppOnlyAuth,
    Authentication,
    ClientCredentials,
    UserAccessTokens,
    UserCredentials,
)
from xapi_client.exceptions import ConfigurationError

ENV_VAR_MAP = {
    "api_key": "X_API_KEY",
    "api_secret": "X_API_SECRET",
    "access_token": "X_ACCESS_TOKEN",
    "access_token_secret": "X_ACCESS_TOKEN_SECRET",
    "bearer_token": "X_BEARER_TOKEN",
}


@dataclass(slots=True)
class XCredentials:
    """Credential container supporting OAuth 1.0a and OAuth 2.0 tokens."""

    api_key: str | None = None
    api_secret: str | None = None
    access_token: str | None = None
    access_token_secret: str | None = None
    bearer_token: str | None = None

    def is_empty(self) -> bool:
        return all(value in (None, "") for value in asdict(self).values())

    def has_user_context(self) -> bool:
        return all(
            (self.api_key, self.api_secret, self.access_token, self.access_token_secret)
        )

    def merge(self, other: "XCredentials") -> "XCredentials":
        """Merge credential sets, preferring non-null values from ``other``."""

        return XCredentials(
            api_key=other.api_key or self.api_key,
            api_secret=other.api_secret or self.api_secret,
            access_token=other.access_token or self.access_token,
            access_token_secret=other.access_token_secret or self.access_token_secret,
            bearer_token=other.bearer_token or self.bearer_token,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in asdict(self).items()
            if isinstance(value, str) and value
        }

    def to_authentication(self) -> Authentication:
        """
        Select the strongest credential mode available.

        User access tokens win over a bearer token because media upload
        only works in user context.

        Raises:
            ConfigurationError: when neither mode is fully configured.
        """

        if self.has_user_context():
            return UserAccessTokens(
                client_credentials=ClientCredentials(self.api_key, self.api_secret),
                user_credentials=UserCredentials(self.access_token, self.access_token_secret),
            )
        if self.bearer_token:
            return AppOnlyAuth(self.bearer_token)
        raise ConfigurationError(
            "Either an API key/secret with access token/secret or a bearer token is required."
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "XCredentials":
        return cls(
            api_key=data.get("api_key"),
            api_secret=data.get("api_secret"),
            access_token=data.get("access_token"),
            access_token_secret=data.get("access_token_secret"),
            bearer_token=data.get("bearer_token"),
        )


class ConfigManager:
    """Loads and persists credentials from environment variables, .env or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/x_config.json")
        self._env = os.environ if env is None else env
        self._dotenv_path = dotenv_path or Path(".env")

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> XCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no credentials are available.
        """

        for source in priority:
            if source == "env":
                credentials = self._load_from_mapping(self._env)
            elif source == "dotenv":
                credentials = self._load_from_dotenv()
            elif source == "file":
                credentials = self._load_from_file()
            else:
                raise ValueError(f"Unknown credential source '{source}'.")

            if credentials and not credentials.is_empty():
                return credentials

        raise ConfigurationError("X credentials are not configured.")

    def save_credentials(self, credentials: XCredentials) -> None:
        """Persist credentials to disk, merging with existing values."""

        existing = self._load_from_file()
        merged = existing.merge(credentials) if existing else credentials

        self._credential_path.parent.mkdir(parents=True, exist_ok=True)
        with self._credential_path.open("w", encoding="utf-8") as fp:
            json.dump(merged.to_dict(), fp, indent=2, sort_keys=True)

        os.chmod(self._credential_path, 0o600)

    @staticmethod
    def _load_from_mapping(source: Mapping[str, str | None]) -> XCredentials | None:
        values: dict[str, str | None] = {
            field: source.get(env_name) for field, env_name in ENV_VAR_MAP.items()
        }
        credentials = XCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _load_from_dotenv(self) -> XCredentials | None:
        if not self._dotenv_path.exists():
            return None
        return self._load_from_mapping(dotenv_values(self._dotenv_path))

    def _load_from_file(self) -> XCredentials | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )

        credentials = XCredentials.from_mapping(data)
        return credentials if not credentials.is_empty() else None
