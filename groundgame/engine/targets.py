"""Campaign targets and heat-map tiers."""

from dataclasses import dataclass
from typing import Iterable

from groundgame.engine.scoring import TURNOUT_RATE
from groundgame.schemas.zone import Zone


# Party-wide projection (list target)
PARTY_NAME = "Centro Democrático"
PARTY_TOTAL_PROJECTION = 500_000
PARTY_SEATS_PROJECTION = 5

# Candidate's preferential-vote floor
CANDIDATE_SAFE_THRESHOLD = 40_000
CANDIDATE_CRITICAL_THRESHOLD = 35_000  # Below this the seat is in danger


@dataclass(frozen=True)
class ThresholdStatus:
    """Projected total compared against the safe threshold."""

    total_votes: int
    status: str  # safe | at_risk | critical
    progress_pct: float
    gap: int

    @property
    def progress_bar_pct(self) -> float:
        return min(self.progress_pct, 100.0)


def assess_threshold(total_votes: int) -> ThresholdStatus:
    """Classify a projected vote total against the candidate thresholds."""
    if total_votes >= CANDIDATE_SAFE_THRESHOLD:
        status = "safe"
    elif total_votes >= CANDIDATE_CRITICAL_THRESHOLD:
        status = "at_risk"
    else:
        status = "critical"

    return ThresholdStatus(
        total_votes=total_votes,
        status=status,
        progress_pct=total_votes / CANDIDATE_SAFE_THRESHOLD * 100,
        gap=max(CANDIDATE_SAFE_THRESHOLD - total_votes, 0),
    )


def total_potential(zones: Iterable[Zone]) -> float:
    """Turned-out voter pool across zones."""
    return sum(z.population * TURNOUT_RATE for z in zones)


@dataclass(frozen=True)
class OpportunityTier:
    """Heat-map band for an opportunity index."""

    key: str
    label: str
    color: str
    lower_bound: float  # Exclusive


# Highest first; an index belongs to the first tier whose bound it exceeds
OPPORTUNITY_TIERS: tuple[OpportunityTier, ...] = (
    OpportunityTier("very_high", "Muy alta", "#dc2626", 0.8),
    OpportunityTier("high", "Alta", "#f97316", 0.6),
    OpportunityTier("medium", "Media", "#facc15", 0.4),
    OpportunityTier("low", "Baja", "#93c5fd", 0.2),
)

MINIMAL_TIER = OpportunityTier("minimal", "Mínima", "#e5e7eb", 0.0)


def opportunity_tier(index: float) -> OpportunityTier:
    """Map an opportunity index to its heat-map tier."""
    for tier in OPPORTUNITY_TIERS:
        if index > tier.lower_bound:
            return tier
    return MINIMAL_TIER
