"""Spherical-approximation geometry: radius boxes, circle rings, distances."""

from __future__ import annotations

import math
from typing import Any

from earth_atlas.schemas import BoundingBox, Point

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE = 111.0  # 1° latitude ≈ 111 km


def bounding_box(center: Point, radius_km: float) -> BoundingBox:
    """
    Box enclosing a radius around ``center``.

    Longitude degrees shrink with cos(latitude), so the east-west delta is
    widened accordingly.
    """
    lat_delta = radius_km / KM_PER_DEGREE
    lng_delta = radius_km / (KM_PER_DEGREE * math.cos(math.radians(center.latitude)))
    return BoundingBox(
        south=center.latitude - lat_delta,
        north=center.latitude + lat_delta,
        west=center.longitude - lng_delta,
        east=center.longitude + lng_delta,
    )


def circle_polygon(
    center: Point, radius_km: float, points: int = 64
) -> list[tuple[float, float]]:
    """
    Closed ring of ``(lng, lat)`` pairs approximating a circle.

    Returns ``points + 1`` coordinates; the last one repeats the first.
    """
    angular = math.degrees(radius_km / EARTH_RADIUS_KM)
    lng_scale = math.cos(math.radians(center.latitude))
    ring: list[tuple[float, float]] = []
    for i in range(points):
        angle = (i / points) * 2 * math.pi
        lat = center.latitude + angular * math.sin(angle)
        lng = center.longitude + angular * math.cos(angle) / lng_scale
        ring.append((lng, lat))
    ring.append(ring[0])
    return ring


def circle_geojson(center: Point, radius_km: float, points: int = 64) -> dict[str, Any]:
    """GeoJSON Feature wrapping :func:`circle_polygon` for map layers."""
    ring = [list(coord) for coord in circle_polygon(center, radius_km, points)]
    return {
        "type": "Feature",
        "properties": {"radius_km": radius_km},
        "geometry": {"type": "Polygon", "coordinates": [ring]},
    }


def distance_km(a: Point, b: Point) -> float:
    """Great-circle (haversine) distance between two points."""
    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    dlat = lat2 - lat1
    dlng = math.radians(b.longitude - a.longitude)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))
