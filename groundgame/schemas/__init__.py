"""Pydantic schemas for catalog data and API validation."""

from groundgame.schemas.zone import (
    Municipality,
    Zone,
    Segment,
)
from groundgame.schemas.simulation import (
    FocusArea,
    SimulationParameters,
    DEFAULT_PARAMETERS,
    SetFieldRequest,
    ScenarioRequest,
    SegmentToggleResponse,
    ScoreBreakdown,
    RankedZoneResponse,
    ThresholdAssessment,
    RankingResponse,
    HexagonResponse,
    ScenarioResponse,
)

__all__ = [
    "Municipality",
    "Zone",
    "Segment",
    "FocusArea",
    "SimulationParameters",
    "DEFAULT_PARAMETERS",
    "SetFieldRequest",
    "ScenarioRequest",
    "SegmentToggleResponse",
    "ScoreBreakdown",
    "RankedZoneResponse",
    "ThresholdAssessment",
    "RankingResponse",
    "HexagonResponse",
    "ScenarioResponse",
]
