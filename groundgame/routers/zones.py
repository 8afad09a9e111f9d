"""Zone ranking and map geometry endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from groundgame.config import get_settings
from groundgame.engine.geometry import axial_to_point, zone_anchor
from groundgame.engine.session import CampaignSession, UnknownZoneError, get_session
from groundgame.engine.targets import opportunity_tier
from groundgame.schemas.simulation import HexagonResponse, RankedZoneResponse, RankingResponse
from groundgame.services.reporting import build_ranked_zone, build_ranking_response

router = APIRouter()


@router.get("/zones/ranking", response_model=RankingResponse)
async def get_ranking(
    limit: Optional[int] = Query(None, ge=1, description="Return only the top N zones"),
    include_breakdown: bool = Query(True, description="Include formula intermediate terms"),
    session: CampaignSession = Depends(get_session),
):
    """
    Rank every zone by opportunity index under the current parameters.

    Returns:
    - Zones best-to-worst with opportunity index, estimated votes and tier
    - Total estimated votes over ALL zones (limit only truncates the list)
    - Comparison of the total against the candidate's safe threshold
    """
    result = session.rank()
    return build_ranking_response(session, result, limit, include_breakdown)


@router.get("/zones/top", response_model=RankingResponse)
async def get_top_zones(session: CampaignSession = Depends(get_session)):
    """Top zones using the configured display limit."""
    settings = get_settings()
    result = session.rank()
    return build_ranking_response(session, result, settings.top_zones_limit, include_breakdown=False)


@router.get("/zones/hexagons", response_model=list[HexagonResponse])
async def get_hexagons(
    layout: Literal["geo", "grid"] = Query("geo", description="Geographic anchors or schematic axial grid"),
    radius: Optional[float] = Query(None, gt=0, description="Override hexagon radius"),
    session: CampaignSession = Depends(get_session),
):
    """
    Hexagon vertices for every zone, coloured by current opportunity.

    The geo layout centers each hexagon on the zone anchor (x=longitude,
    y=latitude); the grid layout uses the zone's axial coordinates.
    """
    settings = get_settings()
    result = session.rank()

    if layout == "geo":
        size = radius or settings.hex_radius_degrees
        polygons = session.hexagons(size)
        centers = {z.id: zone_anchor(z) for z in session.zones}
    else:
        size = radius or settings.hex_size_px
        polygons = session.grid_hexagons(size)
        centers = {
            z.id: axial_to_point(z.hex_q, z.hex_r, size)
            for z in session.zones
            if z.id in polygons
        }

    hexagons = []
    for ranked in result.zones:
        zone_id = ranked.zone.id
        if zone_id not in polygons:
            continue
        hexagons.append(HexagonResponse(
            zone_id=zone_id,
            center=centers[zone_id].as_tuple(),
            vertices=[p.as_tuple() for p in polygons[zone_id]],
            opportunity_index=ranked.opportunity_index,
            color=opportunity_tier(ranked.opportunity_index).color,
        ))
    return hexagons


@router.get("/zones/{zone_id}", response_model=RankedZoneResponse)
async def get_zone(zone_id: str, session: CampaignSession = Depends(get_session)):
    """Single zone with its current rank and derived values."""
    try:
        session.get_zone(zone_id)
    except UnknownZoneError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Zone {zone_id} not found",
        )
    return build_ranked_zone(session.rank().get(zone_id))
