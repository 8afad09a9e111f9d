"""Observability endpoints for health checks and campaign targets."""

from fastapi import APIRouter, Depends

from groundgame.engine.session import CampaignSession, get_session
from groundgame.engine.targets import (
    CANDIDATE_CRITICAL_THRESHOLD,
    CANDIDATE_SAFE_THRESHOLD,
    OPPORTUNITY_TIERS,
    MINIMAL_TIER,
    PARTY_NAME,
    PARTY_SEATS_PROJECTION,
    PARTY_TOTAL_PROJECTION,
    total_potential,
)
from groundgame.services.reporting import build_threshold

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "groundgame",
        "version": "0.1.0",
    }


@router.get("/targets")
async def get_targets(session: CampaignSession = Depends(get_session)):
    """
    Campaign constants and how the current projection compares.

    The thresholds are fixed; only the projected total moves with the
    simulation parameters.
    """
    result = session.rank()
    return {
        "party_name": PARTY_NAME,
        "party_total_projection": PARTY_TOTAL_PROJECTION,
        "party_seats_projection": PARTY_SEATS_PROJECTION,
        "safe_threshold": CANDIDATE_SAFE_THRESHOLD,
        "critical_threshold": CANDIDATE_CRITICAL_THRESHOLD,
        "total_potential": round(total_potential(session.zones)),
        "threshold": build_threshold(result.total_votes).model_dump(),
    }


@router.get("/tiers")
async def list_tiers():
    """Heat-map legend (highest tier first)."""
    return {
        "tiers": [
            {
                "key": t.key,
                "label": t.label,
                "color": t.color,
                "lower_bound": t.lower_bound,
            }
            for t in (*OPPORTUNITY_TIERS, MINIMAL_TIER)
        ]
    }
