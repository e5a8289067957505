"""Binary payload segmentation for chunked media upload.

Chunks are produced lazily and in order. Every chunk holds exactly
``chunk_size`` bytes except the last, which holds the remainder.
"""

from __future__ import annotations

import base64
from typing import Iterator

# 4,096,000 bytes, the per-segment ceiling of the APPEND command.
MAX_CHUNK_SIZE = 4 * 1000 * 1024


def _check_arguments(total_bytes: int, chunk_size: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be a positive integer")
    if total_bytes <= 0:
        raise ValueError("cannot split an empty payload")


def count_chunks(total_bytes: int, *, chunk_size: int = MAX_CHUNK_SIZE) -> int:
    """Return how many segments a payload of ``total_bytes`` splits into."""

    _check_arguments(total_bytes, chunk_size)
    full_chunks, remainder = divmod(total_bytes, chunk_size)
    return full_chunks + (1 if remainder else 0)


def iter_chunks(data: bytes, *, chunk_size: int = MAX_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield contiguous slices of ``data`` in payload order."""

    _check_arguments(len(data), chunk_size)
    view = memoryview(data)
    for start in range(0, len(data), chunk_size):
        yield bytes(view[start : start + chunk_size])


def encode_chunks(data: bytes, *, chunk_size: int = MAX_CHUNK_SIZE) -> Iterator[str]:
    """Yield base64 encoded chunks ready for the ``media_data`` form field.

    The argument check runs eagerly so an empty payload fails at call time
    rather than on first iteration.
    """

    _check_arguments(len(data), chunk_size)
    return (
        base64.b64encode(chunk).decode("ascii")
        for chunk in iter_chunks(data, chunk_size=chunk_size)
    )
