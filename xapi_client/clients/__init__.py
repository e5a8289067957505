"""
Client adapters: the HTTP transport and the authenticated X API client.
"""

__all__ = [
    "api_client",
    "http_client",
]
