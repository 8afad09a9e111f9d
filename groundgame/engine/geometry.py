"""Hexagon geometry for the tessellated map overlay."""

import math
from dataclasses import dataclass

import numpy as np

from groundgame.schemas.zone import Zone


@dataclass(frozen=True)
class Point:
    """A 2D coordinate (pixels, SVG units or degrees)."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# Pointy-top orientation: first vertex at -30 degrees, then every 60
HEX_ANGLES_DEG = np.arange(6) * 60.0 - 30.0


def hexagon_vertices(center: Point, radius: float) -> list[Point]:
    """
    Compute the six vertices of a regular pointy-top hexagon.

    Vertices are returned in rotational order starting at -30 degrees,
    suitable for use as a polygon (the caller closes the path).

    The function is unit-agnostic. For geographic anchors it treats a
    degree of latitude and a degree of longitude as equal lengths, which
    stretches hexagons away from the equator.

    Args:
        center: Hexagon center
        radius: Distance from center to each vertex (must be > 0)

    Returns:
        List of 6 points
    """
    if not radius > 0:
        raise ValueError(f"Hexagon radius must be positive, got {radius}")

    angles = np.deg2rad(HEX_ANGLES_DEG)
    xs = center.x + radius * np.cos(angles)
    ys = center.y + radius * np.sin(angles)

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def axial_to_point(q: int, r: int, size: float) -> Point:
    """Center of an axial (q, r) cell in a pointy-top hex grid."""
    x = size * (math.sqrt(3) * q + math.sqrt(3) / 2 * r)
    y = size * (3 / 2 * r)
    return Point(x, y)


def zone_anchor(zone: Zone) -> Point:
    """Geographic anchor of a zone as (x=longitude, y=latitude)."""
    return Point(zone.longitude, zone.latitude)


def zone_hexagon(zone: Zone, radius: float) -> list[Point]:
    """Hexagon around a zone's geographic anchor."""
    return hexagon_vertices(zone_anchor(zone), radius)


def zone_grid_hexagon(zone: Zone, size: float) -> list[Point]:
    """
    Hexagon for a zone placed on the schematic axial grid.

    Raises:
        ValueError: If the zone has no axial coordinates
    """
    if zone.hex_q is None or zone.hex_r is None:
        raise ValueError(f"Zone {zone.id} has no axial grid coordinates")
    return hexagon_vertices(axial_to_point(zone.hex_q, zone.hex_r, size), size)
