"""
Factory for creating X API client instances with proper initialization.
"""

from __future__ import annotations

from xapi_client.clients.api_client import XApiClient
from xapi_client.clients.http_client import DEFAULT_TIMEOUT, HttpClient
from xapi_client.config import ConfigManager, XCredentials
from xapi_client.exceptions import ConfigurationError


class XClientFactory:
    """Factory for creating properly initialized X API clients."""

    @staticmethod
    def create_from_config(
        config_manager: ConfigManager,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> XApiClient:
        """
        Create XApiClient from credentials found by a ConfigManager.

        Raises:
            ConfigurationError: If credentials are missing or incomplete
        """
        credentials = config_manager.load_credentials()
        return XClientFactory.create_from_credentials(credentials, timeout=timeout)

    @staticmethod
    def create_from_credentials(
        credentials: XCredentials,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        require_user_context: bool = False,
    ) -> XApiClient:
        """
        Create XApiClient directly from credentials.

        Args:
            credentials: XCredentials with OAuth tokens
            timeout: Per-request timeout in seconds
            require_user_context: Reject credentials that only allow app-only access

        Raises:
            ConfigurationError: If required credentials are missing
        """
        if require_user_context:
            if not credentials.api_key or not credentials.api_secret:
                raise ConfigurationError("API key and secret are required")
            if not credentials.access_token or not credentials.access_token_secret:
                raise ConfigurationError("Access token and secret are required")

        authentication = credentials.to_authentication()
        return XApiClient(authentication, http=HttpClient(timeout=timeout))
