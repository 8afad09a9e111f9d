"""Conversion of engine results into API response schemas."""

from typing import Optional

from groundgame.engine.ranking import RankedZone, RankingResult
from groundgame.engine.session import CampaignSession
from groundgame.engine.targets import (
    CANDIDATE_CRITICAL_THRESHOLD,
    CANDIDATE_SAFE_THRESHOLD,
    assess_threshold,
    opportunity_tier,
)
from groundgame.schemas.simulation import (
    RankedZoneResponse,
    RankingResponse,
    ScoreBreakdown,
    ThresholdAssessment,
)


def build_threshold(total_votes: int) -> ThresholdAssessment:
    """Threshold assessment schema for a vote total."""
    status = assess_threshold(total_votes)
    return ThresholdAssessment(
        total_votes=total_votes,
        safe_threshold=CANDIDATE_SAFE_THRESHOLD,
        critical_threshold=CANDIDATE_CRITICAL_THRESHOLD,
        status=status.status,
        progress_pct=round(status.progress_pct, 1),
        progress_bar_pct=round(status.progress_bar_pct, 1),
        gap=status.gap,
    )


def build_ranked_zone(ranked: RankedZone, include_breakdown: bool = True) -> RankedZoneResponse:
    """Flatten a ranked zone (static fields + derived values) for the client."""
    zone, score = ranked.zone, ranked.score
    tier = opportunity_tier(score.opportunity_index)

    breakdown = None
    if include_breakdown:
        breakdown = ScoreBreakdown(
            avg_weight=score.avg_weight,
            base_index=score.base_index,
            adjusted_support=score.adjusted_support,
            adjusted_density=score.adjusted_density,
            competitor_factor=score.competitor_factor,
        )

    return RankedZoneResponse(
        rank=ranked.rank,
        id=zone.id,
        name=zone.name,
        municipality=zone.municipality,
        population=zone.population,
        demographic_density=zone.demographic_density,
        historical_support=zone.historical_support,
        latitude=zone.latitude,
        longitude=zone.longitude,
        target_audience=zone.target_audience,
        strategic_message=zone.strategic_message,
        hex_q=zone.hex_q,
        hex_r=zone.hex_r,
        opportunity_index=score.opportunity_index,
        estimated_votes=score.estimated_votes,
        tier=tier.key,
        color=tier.color,
        breakdown=breakdown,
    )


def build_ranking_response(
    session: CampaignSession,
    result: RankingResult,
    limit: Optional[int] = None,
    include_breakdown: bool = True,
) -> RankingResponse:
    """Ranking response; `limit` truncates the zone list but not the total."""
    zones = result.zones if limit is None else result.top(limit)
    return RankingResponse(
        parameters=session.parameters,
        active_segments=[s.id for s in session.active_segments],
        total_votes=result.total_votes,
        zone_count=len(result.zones),
        zones=[build_ranked_zone(r, include_breakdown) for r in zones],
        threshold=build_threshold(result.total_votes),
    )
