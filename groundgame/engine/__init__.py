"""Opportunity scoring and simulation engine components."""

from groundgame.engine.geometry import Point, hexagon_vertices, axial_to_point, zone_hexagon
from groundgame.engine.scoring import ScoringError, ZoneScore, score_zone, average_segment_weight
from groundgame.engine.ranking import RankedZone, RankingResult, rank_zones
from groundgame.engine.scenarios import (
    SCENARIO_RULES,
    PRESETS,
    ScenarioRule,
    resolve_scenario,
    resolve_preset,
)
from groundgame.engine.session import CampaignSession, get_session

__all__ = [
    "Point",
    "hexagon_vertices",
    "axial_to_point",
    "zone_hexagon",
    "ZoneScore",
    "score_zone",
    "average_segment_weight",
    "RankedZone",
    "RankingResult",
    "ScoringError",
    "rank_zones",
    "SCENARIO_RULES",
    "PRESETS",
    "ScenarioRule",
    "resolve_scenario",
    "resolve_preset",
    "CampaignSession",
    "get_session",
]
