"""API routers for the campaign opportunity service."""

from groundgame.routers import observability, zones, simulate

__all__ = [
    "observability",
    "zones",
    "simulate",
]
