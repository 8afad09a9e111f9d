"""Opportunity scoring model for campaign zones."""

import math
from dataclasses import dataclass
from typing import Iterable

from groundgame.config import ALL_AREAS
from groundgame.schemas.simulation import SimulationParameters
from groundgame.schemas.zone import Segment, Zone


class ScoringError(RuntimeError):
    """A zone produced a non-finite score; the whole ranking is rejected."""

    def __init__(self, zone_id: str, detail: str):
        self.zone_id = zone_id
        super().__init__(f"Cannot score zone {zone_id}: {detail}")


# Fixed model constants (not configurable)
DENSITY_WEIGHT = 0.6
SUPPORT_WEIGHT = 0.4
FOCUS_BOOST = 1.2  # Zones inside the focus municipality
FOCUS_PENALTY = 0.5  # Zones outside it
TURNOUT_RATE = 0.45  # Share of population expected to vote
CAPTURE_RATE = 0.15  # Share of turned-out voters captured in a zone


@dataclass(frozen=True)
class ZoneScore:
    """Derived values for one zone under one set of parameters."""

    zone_id: str
    opportunity_index: float
    estimated_votes: int

    # Intermediate terms ("show my work")
    avg_weight: float
    base_index: float
    adjusted_support: float
    adjusted_density: float
    competitor_factor: float


def clamp01(value: float) -> float:
    """Clamp to [0, 1]. NaN passes through unchanged."""
    return min(max(value, 0.0), 1.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def average_segment_weight(active_segments: Iterable[Segment]) -> float:
    """
    Mean weight of the active segments.

    An empty selection yields exactly 1.0 (neutral weighting).
    """
    weights = [s.weight for s in active_segments]
    if not weights:
        return 1.0
    return sum(weights) / len(weights)


def focus_multiplier(zone: Zone, focus_area: str) -> float:
    """Municipality adjustment applied to the base index."""
    if focus_area == ALL_AREAS:
        return 1.0
    return FOCUS_BOOST if zone.municipality == focus_area else FOCUS_PENALTY


def score_zone(
    zone: Zone,
    active_segments: Iterable[Segment],
    params: SimulationParameters,
) -> ZoneScore:
    """
    Compute opportunity index and estimated votes for a zone.

    index = clamp01((min(base * turnout, 1) * 0.6
                     + min(support * strength, 1) * 0.4) * (1 - competitor))
    votes = round(population * 0.45 * index * 0.15)

    where base = density * mean(active weights) * focus multiplier.

    Args:
        zone: Zone to score
        active_segments: Segments currently targeted (may be empty)
        params: Current simulation parameters

    Returns:
        Score with the intermediate terms

    Raises:
        ScoringError: If the zone data yields a non-finite vote estimate
    """
    avg_weight = average_segment_weight(active_segments)

    base_index = zone.demographic_density * avg_weight
    base_index *= focus_multiplier(zone, params.focus_area)

    adjusted_support = min(zone.historical_support * params.party_strength, 1.0)
    adjusted_density = min(base_index * params.turnout_factor, 1.0)
    competitor_factor = 1.0 - params.competitor_impact

    opportunity_index = clamp01(
        (adjusted_density * DENSITY_WEIGHT + adjusted_support * SUPPORT_WEIGHT)
        * competitor_factor
    )

    raw_votes = zone.population * TURNOUT_RATE * opportunity_index * CAPTURE_RATE
    if not math.isfinite(raw_votes):
        raise ScoringError(zone.id, f"estimated votes is {raw_votes}")
    estimated_votes = round_half_up(raw_votes)

    return ZoneScore(
        zone_id=zone.id,
        opportunity_index=opportunity_index,
        estimated_votes=estimated_votes,
        avg_weight=avg_weight,
        base_index=base_index,
        adjusted_support=adjusted_support,
        adjusted_density=adjusted_density,
        competitor_factor=competitor_factor,
    )
