"""
Service layer modules orchestrate domain workflows (media, mutes, posts)
on top of the lower-level client adapters.
"""

__all__ = [
    "media_service",
    "mute_service",
    "post_service",
]
