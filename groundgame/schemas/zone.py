"""Pydantic schemas for the static zone and segment catalogs."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Municipality = Literal["Medellín", "Bello"]


class Zone(BaseModel):
    """A geographic targeting unit (neighborhood or commune).

    Only static attributes live here. Opportunity index and vote estimates
    are derived per recomputation and kept in a separate record.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1, description="Unique zone id (e.g., 'b-01')")
    name: str = Field(..., min_length=1, description="Human-readable name")
    municipality: Municipality = Field(..., description="Administrative grouping")
    population: int = Field(..., gt=0, description="Total population")
    demographic_density: float = Field(
        ..., ge=0.0, le=1.0, description="Density of the targeted demography (0-1)"
    )
    historical_support: float = Field(
        ..., ge=0.0, le=1.0, description="Historical support for the party (0-1)"
    )
    latitude: float = Field(..., ge=-90, le=90, description="Anchor latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Anchor longitude")

    # Axial coordinates for the schematic tessellation layout
    hex_q: Optional[int] = Field(None, description="Axial column in the hex grid")
    hex_r: Optional[int] = Field(None, description="Axial row in the hex grid")

    # Display only
    target_audience: Optional[str] = Field(None, max_length=255)
    strategic_message: Optional[str] = Field(None, max_length=500)


class Segment(BaseModel):
    """A demographic micro-group used to weight scoring."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1, description="Unique segment id")
    name: str = Field(..., min_length=1, description="Display name")
    active: bool = Field(default=False, description="Whether the segment is targeted")
    weight: float = Field(..., gt=0, description="Weight multiplier (typically 1.0-1.6)")
