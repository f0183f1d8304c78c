"""
Geospatial helpers: great-circle distance, radius parsing and bounding boxes.
"""

import math
import re
from dataclasses import dataclass
from typing import Union

from .schema import GeoPoint

EARTH_RADIUS_KM = 6371.0

_DISTANCE_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(km|m)?\s*$", re.IGNORECASE)


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine great-circle distance between two points, in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(d_lon / 2) ** 2)
    # Rounding can push a a hair above 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def point_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return distance_km(a.lat, a.lon, b.lat, b.lon)


def parse_distance_km(value: Union[float, int, str]) -> float:
    """
    Parse a radius into kilometers.

    Numbers are taken as kilometers; strings may carry a ``km`` or ``m``
    unit suffix ("5km", "750m", "2.5"). Negative, non-finite or malformed
    values raise ValueError.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid distance: {value!r}")
    if isinstance(value, (int, float)):
        amount = float(value)
        unit = "km"
    else:
        match = _DISTANCE_RE.match(str(value))
        if not match:
            raise ValueError(f"Invalid distance: {value!r}")
        amount = float(match.group(1))
        unit = (match.group(2) or "km").lower()

    if not math.isfinite(amount):
        raise ValueError(f"Distance must be finite: {value!r}")
    if amount < 0:
        raise ValueError(f"Distance must be non-negative: {value}")
    return amount / 1000.0 if unit == "m" else amount


@dataclass(frozen=True)
class BoundingBox:
    """Map viewport given by its top-left and bottom-right corners."""

    top_left: GeoPoint
    bottom_right: GeoPoint

    def contains(self, point: GeoPoint) -> bool:
        return (self.bottom_right.lat <= point.lat <= self.top_left.lat and
                self.top_left.lon <= point.lon <= self.bottom_right.lon)
