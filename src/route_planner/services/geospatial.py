"""Geospatial helper functions."""

from __future__ import annotations

import math
import re
from typing import Sequence

from ..config import settings
from ..exceptions import ParseError
from ..models.domain import Point

EARTH_RADIUS_KM = 6371.0

_WHITESPACE = re.compile(r"\s+")


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Point, b: Point) -> float:
    return haversine_km(a.lat, a.lng, b.lat, b.lng)


def clean_coordinates(text: str) -> str:
    """Strip every whitespace character from a "lat,lng" string."""

    return _WHITESPACE.sub("", text or "")


def parse_coordinates(text: str) -> Point:
    """Parse a "lat,lng" string into a Point.

    Raises ParseError unless the string splits into exactly two finite numbers
    that fall inside the valid latitude/longitude ranges.
    """

    if not isinstance(text, str):
        raise ParseError(f"Failed to parse coordinates: {text!r}", value=text)
    parts = text.split(",")
    if len(parts) != 2:
        raise ParseError(f"Failed to parse coordinates: {text!r}", value=text)
    try:
        lat, lng = (float(part) for part in parts)
    except ValueError as exc:
        raise ParseError(f"Failed to parse coordinates: {text!r}", value=text) from exc
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ParseError(f"Coordinates must be finite numbers: {text!r}", value=text)
    try:
        return Point(lat=lat, lng=lng)
    except ValueError as exc:
        raise ParseError(str(exc), value=text) from exc


def build_navigation_link(origin: Point, destination: Point, *, base_url: str | None = None) -> str:
    """Return a map-service directions link between two points."""

    base = (base_url or settings.maps_base_url).rstrip("/")
    return f"{base}/{origin.lat},{origin.lng}/{destination.lat},{destination.lng}"


def is_within_bounds(point: Point, bounds: Sequence[float]) -> bool:
    """Return True if the point lies inside (lat_min, lat_max, lng_min, lng_max), inclusive."""

    lat_min, lat_max, lng_min, lng_max = bounds
    return lat_min <= point.lat <= lat_max and lng_min <= point.lng <= lng_max
