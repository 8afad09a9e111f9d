"""Ranking aggregator: scores every zone and totals projected votes."""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from groundgame.engine.scoring import ScoringError, ZoneScore, score_zone
from groundgame.schemas.simulation import SimulationParameters
from groundgame.schemas.zone import Segment, Zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedZone:
    """A catalog zone paired with its derived score."""

    rank: int
    zone: Zone
    score: ZoneScore

    @property
    def opportunity_index(self) -> float:
        return self.score.opportunity_index

    @property
    def estimated_votes(self) -> int:
        return self.score.estimated_votes


@dataclass(frozen=True)
class RankingResult:
    """Ordered zones (best first) and the campaign-wide vote total."""

    zones: tuple[RankedZone, ...]
    total_votes: int

    def top(self, limit: int) -> tuple[RankedZone, ...]:
        """First `limit` zones. The total still covers every zone."""
        return self.zones[:max(limit, 0)]

    def get(self, zone_id: str) -> RankedZone:
        for ranked in self.zones:
            if ranked.zone.id == zone_id:
                return ranked
        raise KeyError(zone_id)


def _check_score(score: ZoneScore) -> None:
    if not math.isfinite(score.opportunity_index):
        raise ScoringError(score.zone_id, f"opportunity index is {score.opportunity_index}")
    if score.estimated_votes < 0:
        raise ScoringError(score.zone_id, f"estimated votes is {score.estimated_votes}")


def rank_zones(
    zones: Sequence[Zone],
    segments: Iterable[Segment],
    params: SimulationParameters,
) -> RankingResult:
    """
    Score every zone and sort by opportunity index, highest first.

    Ties keep catalog order (the sort is stable). The total sums every
    zone's estimated votes regardless of any display truncation.

    Args:
        zones: Zone catalog
        segments: Segment catalog; only active segments are used
        params: Current simulation parameters

    Returns:
        Ranking result

    Raises:
        ScoringError: If any zone yields a non-finite or negative score
    """
    active = [s for s in segments if s.active]

    scores: list[tuple[Zone, ZoneScore]] = []
    for zone in zones:
        try:
            score = score_zone(zone, active, params)
            _check_score(score)
        except ScoringError as e:
            logger.error(f"[RANKING] {e}")
            raise
        scores.append((zone, score))

    ordered = sorted(scores, key=lambda pair: pair[1].opportunity_index, reverse=True)
    ranked = tuple(
        RankedZone(rank=i + 1, zone=zone, score=score)
        for i, (zone, score) in enumerate(ordered)
    )
    total_votes = sum(r.estimated_votes for r in ranked)

    logger.debug(
        f"[RANKING] zones={len(ranked)} active_segments={len(active)} "
        f"total_votes={total_votes}"
    )
    return RankingResult(zones=ranked, total_votes=total_votes)
