"""Utility helpers for the xapi_client package."""

from __future__ import annotations

__all__ = [
    "MAX_CHUNK_SIZE",
    "count_chunks",
    "encode_chunks",
    "iter_chunks",
]

from .chunking import MAX_CHUNK_SIZE, count_chunks, encode_chunks, iter_chunks
