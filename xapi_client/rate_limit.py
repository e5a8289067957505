"""
Rate limit metadata parsed from X API response headers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    lowered = {key.lower(): value for key, value in headers.items()}
    value = lowered.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(slots=True)
class RateLimitInfo:
    """Represents parsed rate limit metadata from X headers."""

    limit: int | None = None
    remaining: int | None = None
    reset_at: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo":
        return cls(
            limit=_header_int(headers, "x-rate-limit-limit"),
            remaining=_header_int(headers, "x-rate-limit-remaining"),
            reset_at=_header_int(headers, "x-rate-limit-reset"),
        )

    def is_exhausted(self) -> bool:
        return self.remaining is not None and self.remaining <= 0
