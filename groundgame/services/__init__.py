"""Response assembly services."""

from groundgame.services.reporting import (
    build_threshold,
    build_ranked_zone,
    build_ranking_response,
)

__all__ = [
    "build_threshold",
    "build_ranked_zone",
    "build_ranking_response",
]
