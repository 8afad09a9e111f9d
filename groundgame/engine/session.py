"""
Campaign session - the single owner of mutable simulation state.

Holds the zone catalog, the segment catalog (with active flags) and the
current simulation parameters. Every mutation replaces a whole value;
derived scores are recomputed on demand and never stored.
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional, Union

from groundgame.engine.catalog import load_segment_catalog, load_zone_catalog
from groundgame.engine.geometry import Point, zone_grid_hexagon, zone_hexagon
from groundgame.engine.ranking import RankedZone, RankingResult, rank_zones
from groundgame.engine.scenarios import (
    FALLBACK_RULE,
    ScenarioRule,
    apply_field,
    get_preset,
    match_scenario,
)
from groundgame.schemas.simulation import DEFAULT_PARAMETERS, SimulationParameters
from groundgame.schemas.zone import Segment, Zone
from groundgame.seed_data import SEGMENT_RECORDS, ZONE_RECORDS

logger = logging.getLogger(__name__)


class UnknownSegmentError(KeyError):
    """Segment id is not in the catalog."""


class UnknownZoneError(KeyError):
    """Zone id is not in the catalog."""


class CampaignSession:
    """In-memory simulation state for one operator."""

    def __init__(
        self,
        zones: Iterable[Union[dict, Zone]],
        segments: Iterable[Union[dict, Segment]],
        parameters: SimulationParameters = DEFAULT_PARAMETERS,
    ):
        self.zones: tuple[Zone, ...] = load_zone_catalog(zones)
        self._segments: tuple[Segment, ...] = load_segment_catalog(segments)
        self._parameters = parameters

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def parameters(self) -> SimulationParameters:
        return self._parameters

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def active_segments(self) -> tuple[Segment, ...]:
        return tuple(s for s in self._segments if s.active)

    def get_zone(self, zone_id: str) -> Zone:
        for zone in self.zones:
            if zone.id == zone_id:
                return zone
        raise UnknownZoneError(zone_id)

    # ------------------------------------------------------------------
    # Parameter verbs
    # ------------------------------------------------------------------

    def _replace_parameters(self, new: SimulationParameters, source: str) -> SimulationParameters:
        old = self._parameters
        self._parameters = new
        logger.info(
            f"[SESSION] {source}: party_strength={new.party_strength} "
            f"turnout_factor={new.turnout_factor} competitor_impact={new.competitor_impact} "
            f"focus_area={new.focus_area}"
        )
        if old == new:
            logger.debug(f"[SESSION] {source} left parameters unchanged")
        return new

    def set_field(self, field_name: str, value: Union[float, str]) -> SimulationParameters:
        """Slider input: set one parameter. State is untouched on error."""
        new = apply_field(self._parameters, field_name, value)
        return self._replace_parameters(new, f"set_field({field_name})")

    def apply_scenario(self, text: str) -> ScenarioRule:
        """Resolve free text and replace the parameters. Returns the rule that fired."""
        rule = match_scenario(text)
        self._replace_parameters(rule.apply(self._parameters), f"scenario[{rule.name}]")
        if rule is FALLBACK_RULE:
            logger.info(f"[SESSION] No scenario keyword in {text[:60]!r}, applied turnout nudge")
        return rule

    def apply_preset(self, name: str) -> ScenarioRule:
        """Replace the parameters with a named preset."""
        rule = get_preset(name)
        self._replace_parameters(rule.apply(self._parameters), f"preset[{rule.name}]")
        return rule

    def reset(self) -> SimulationParameters:
        """Restore default parameters. Segment flags are kept."""
        return self._replace_parameters(DEFAULT_PARAMETERS, "reset")

    # ------------------------------------------------------------------
    # Segment verbs
    # ------------------------------------------------------------------

    def set_segment_active(self, segment_id: str, active: bool) -> Segment:
        """Set a segment's active flag, replacing the segment tuple."""
        updated: Optional[Segment] = None
        segments = []
        for segment in self._segments:
            if segment.id == segment_id:
                segment = segment.model_copy(update={"active": active})
                updated = segment
            segments.append(segment)

        if updated is None:
            raise UnknownSegmentError(segment_id)

        self._segments = tuple(segments)
        logger.info(f"[SESSION] Segment {segment_id} active={active}")
        return updated

    def toggle_segment(self, segment_id: str) -> Segment:
        """Flip a segment's active flag."""
        for segment in self._segments:
            if segment.id == segment_id:
                return self.set_segment_active(segment_id, not segment.active)
        raise UnknownSegmentError(segment_id)

    # ------------------------------------------------------------------
    # Derived output
    # ------------------------------------------------------------------

    def rank(self) -> RankingResult:
        """Full recomputation of scores, order and total."""
        return rank_zones(self.zones, self._segments, self._parameters)

    def top_zones(self, limit: int) -> tuple[RankedZone, ...]:
        return self.rank().top(limit)

    def hexagons(self, radius: float) -> dict[str, list[Point]]:
        """Geographic hexagon per zone, keyed by zone id."""
        return {zone.id: zone_hexagon(zone, radius) for zone in self.zones}

    def grid_hexagons(self, size: float) -> dict[str, list[Point]]:
        """Schematic axial-grid hexagon per zone (zones without grid coordinates are skipped)."""
        return {
            zone.id: zone_grid_hexagon(zone, size)
            for zone in self.zones
            if zone.hex_q is not None and zone.hex_r is not None
        }


def create_default_session() -> CampaignSession:
    """Session over the seeded Medellín - Bello catalog."""
    return CampaignSession(ZONE_RECORDS, SEGMENT_RECORDS)


@lru_cache
def get_session() -> CampaignSession:
    """Process-wide session instance."""
    return create_default_session()
