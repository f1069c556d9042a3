"""Great-circle distance and travel time estimates."""

from math import atan2, cos, radians, sin, sqrt

from pydantic_extra_types.coordinate import Coordinate

from navigator.config.constants import (EARTH_RADIUS_KM, METERS_PER_KM,
                                        SECONDS_PER_HOUR, TRAVEL_SPEEDS_KMH)
from navigator.models import SegmentEstimate, TravelMode


def haversine_distance(origin: Coordinate, destination: Coordinate) -> float:
    """Calculate the great-circle distance between two points on Earth.

    Coordinates are trusted: out-of-range values are not rejected here.

    Args:
        origin: First point, in degrees
        destination: Second point, in degrees

    Returns:
        Distance in kilometers
    """
    lat1 = radians(origin.latitude)
    lat2 = radians(destination.latitude)
    dlat = radians(destination.latitude - origin.latitude)
    dlng = radians(destination.longitude - origin.longitude)

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, a)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def travel_speed(mode: TravelMode) -> int:
    """Average speed in km/h for a travel mode."""
    return TRAVEL_SPEEDS_KMH[TravelMode(mode).value]


def estimate_duration(distance_km: float, mode: TravelMode = TravelMode.WALKING) -> int:
    """Convert a distance into whole seconds of travel at the mode's speed."""
    return round(distance_km / travel_speed(mode) * SECONDS_PER_HOUR)


def estimate_segment(
    origin: Coordinate,
    destination: Coordinate,
    mode: TravelMode = TravelMode.WALKING,
) -> SegmentEstimate:
    """Estimate distance and travel time between two points.

    Args:
        origin: Starting point
        destination: End point
        mode: Travel mode used to pick the average speed

    Returns:
        SegmentEstimate with distance in meters and duration in seconds
    """
    distance_km = haversine_distance(origin, destination)

    return SegmentEstimate(
        distance_meters=distance_km * METERS_PER_KM,
        duration_seconds=estimate_duration(distance_km, mode),
    )
