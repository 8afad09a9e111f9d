"""Pydantic schemas for simulation parameters, requests and responses."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


FocusArea = Literal["All", "Medellín", "Bello"]

ParameterField = Literal["party_strength", "turnout_factor", "competitor_impact", "focus_area"]


# =============================================================================
# Simulation State
# =============================================================================

class SimulationParameters(BaseModel):
    """Current perturbation state of the scoring model.

    Instances are immutable; every change produces a new value that
    replaces the previous one wholesale.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    party_strength: float = Field(default=1.0, gt=0, description="Multiplier on historical support")
    turnout_factor: float = Field(default=1.0, gt=0, description="Multiplier on demographic density")
    competitor_impact: float = Field(
        default=0.0, ge=0.0, lt=1.0, description="Vote-suppressing drag from competitors"
    )
    focus_area: FocusArea = Field(default="All", description="'All' or a single municipality")


DEFAULT_PARAMETERS = SimulationParameters()


# =============================================================================
# Requests
# =============================================================================

class SetFieldRequest(BaseModel):
    """Slider interaction: set exactly one parameter."""

    field: ParameterField = Field(..., description="Parameter to set")
    # bool is listed so JSON true/false reaches the engine as-is and is rejected there
    value: Union[bool, float, str] = Field(..., description="New value (number, or municipality for focus_area)")


class ScenarioRequest(BaseModel):
    """Free-text scenario shortcut."""

    text: str = Field(..., description="Scenario description (keywords are matched)")


class SegmentToggleResponse(BaseModel):
    """Segment state after a toggle."""

    id: str
    name: str
    active: bool
    weight: float


# =============================================================================
# Ranking Output
# =============================================================================

class ScoreBreakdown(BaseModel):
    """Intermediate terms of the opportunity formula."""

    avg_weight: float
    base_index: float
    adjusted_support: float
    adjusted_density: float
    competitor_factor: float


class RankedZoneResponse(BaseModel):
    """A zone with its derived opportunity values."""

    rank: int = Field(..., ge=1, description="1-based position in the ranking")
    id: str
    name: str
    municipality: str
    population: int
    demographic_density: float
    historical_support: float
    latitude: float
    longitude: float
    target_audience: Optional[str] = None
    strategic_message: Optional[str] = None
    hex_q: Optional[int] = None
    hex_r: Optional[int] = None
    opportunity_index: float = Field(..., ge=0.0, le=1.0)
    estimated_votes: int = Field(..., ge=0)
    tier: str = Field(..., description="Heat-map band of the opportunity index")
    color: str = Field(..., description="Heat-map colour for the tier")
    breakdown: Optional[ScoreBreakdown] = None


class ThresholdAssessment(BaseModel):
    """Projected total compared against the candidate's safe threshold."""

    total_votes: int
    safe_threshold: int
    critical_threshold: int
    status: Literal["safe", "at_risk", "critical"]
    progress_pct: float = Field(..., description="Total as a percentage of the safe threshold")
    progress_bar_pct: float = Field(..., ge=0, le=100, description="progress_pct capped at 100")
    gap: int = Field(..., ge=0, description="Votes still missing to reach the safe threshold")


class RankingResponse(BaseModel):
    """Full recomputation result."""

    parameters: SimulationParameters
    active_segments: list[str] = Field(default_factory=list)
    total_votes: int = Field(..., ge=0, description="Sum over all zones, not just the returned slice")
    zone_count: int
    zones: list[RankedZoneResponse] = Field(default_factory=list)
    threshold: ThresholdAssessment


class HexagonResponse(BaseModel):
    """Hexagon polygon for one zone."""

    zone_id: str
    center: tuple[float, float]
    vertices: list[tuple[float, float]] = Field(..., min_length=6, max_length=6)
    opportunity_index: float
    color: str


class ScenarioResponse(BaseModel):
    """Parameters after applying a scenario or preset."""

    matched_rule: str = Field(..., description="Name of the rule that fired ('fallback' if none)")
    parameters: SimulationParameters
    total_votes: int
    threshold: ThresholdAssessment
