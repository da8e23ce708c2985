from .media_session import MediaSession

__all__ = [
    "MediaSession",
]
