"""Simulation parameter and segment endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from groundgame.engine.scenarios import (
    SliderBoundsError,
    UnknownFieldError,
    UnknownPresetError,
    PRESETS,
)
from groundgame.engine.session import CampaignSession, UnknownSegmentError, get_session
from groundgame.schemas.simulation import (
    ScenarioRequest,
    ScenarioResponse,
    SegmentToggleResponse,
    SetFieldRequest,
    SimulationParameters,
)
from groundgame.services.reporting import build_threshold

router = APIRouter()


def _scenario_response(session: CampaignSession, rule_name: str) -> ScenarioResponse:
    result = session.rank()
    return ScenarioResponse(
        matched_rule=rule_name,
        parameters=session.parameters,
        total_votes=result.total_votes,
        threshold=build_threshold(result.total_votes),
    )


@router.get("/simulation/parameters", response_model=SimulationParameters)
async def get_parameters(session: CampaignSession = Depends(get_session)):
    """Current simulation parameters."""
    return session.parameters


@router.post("/simulation/field", response_model=SimulationParameters)
async def set_field(
    request: SetFieldRequest,
    session: CampaignSession = Depends(get_session),
):
    """
    Slider input: set exactly one parameter.

    party_strength and turnout_factor accept [0.5, 1.5]; competitor_impact
    accepts [0, 1); focus_area accepts 'All' or a municipality.
    """
    try:
        return session.set_field(request.field, request.value)
    except (SliderBoundsError, UnknownFieldError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.post("/simulation/scenario", response_model=ScenarioResponse)
async def apply_scenario(
    request: ScenarioRequest,
    session: CampaignSession = Depends(get_session),
):
    """
    Apply a free-text scenario.

    Keywords are matched case-insensitively, first rule wins. Text with no
    known keyword applies a small turnout nudge on top of the current state.
    """
    rule = session.apply_scenario(request.text)
    return _scenario_response(session, rule.name)


@router.get("/presets")
async def list_presets():
    """List preset names with their parameter patches."""
    return {
        "presets": [
            {
                "name": rule.name,
                "keywords": list(rule.keywords),
                "patch": rule.patch,
            }
            for rule in PRESETS.values()
        ]
    }


@router.post("/simulation/preset/{name}", response_model=ScenarioResponse)
async def apply_preset(name: str, session: CampaignSession = Depends(get_session)):
    """Apply a named preset (crisis, optimista, bello, reset)."""
    try:
        rule = session.apply_preset(name)
    except UnknownPresetError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown preset: {name}. Available: {list(PRESETS.keys())}",
        )
    return _scenario_response(session, rule.name)


@router.post("/simulation/reset", response_model=SimulationParameters)
async def reset_parameters(session: CampaignSession = Depends(get_session)):
    """Restore default parameters."""
    return session.reset()


@router.get("/segments", response_model=list[SegmentToggleResponse])
async def list_segments(session: CampaignSession = Depends(get_session)):
    """Segment catalog with current active flags."""
    return [SegmentToggleResponse(**s.model_dump()) for s in session.segments]


@router.post("/segments/{segment_id}/toggle", response_model=SegmentToggleResponse)
async def toggle_segment(segment_id: str, session: CampaignSession = Depends(get_session)):
    """Flip a segment's active flag."""
    try:
        segment = session.toggle_segment(segment_id)
    except UnknownSegmentError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Segment {segment_id} not found",
        )
    return SegmentToggleResponse(**segment.model_dump())
