import logging
from typing import Sequence

import polyline
from pydantic_extra_types.coordinate import Coordinate

from navigator.config.constants import (EMERGENCY_INSTRUCTIONS, METERS_PER_KM,
                                        STEP_DISTANCE_SHARES,
                                        STEP_OFFSET_DEGREES,
                                        STEP_WALKING_SPEED_MPS)
from navigator.models import (Bounds, EmergencyType, Maneuver, ManeuverType,
                              RouteStep)
from navigator.planner import haversine_distance

logger = logging.getLogger(__name__)


def encode_polyline(points: Sequence[Coordinate]) -> str:
    """Encode a sequence of coordinates as a Google encoded polyline.

    Args:
        points: Coordinates in travel order

    Returns:
        The encoded polyline string (precision 5)
    """
    return polyline.encode([(p.latitude, p.longitude) for p in points])


def offset_coordinate(
    point: Coordinate, lat_offset: float, lng_offset: float
) -> Coordinate:
    """Shift a coordinate by the given degrees, clamped to the valid range."""
    return Coordinate(
        latitude=min(90.0, max(-90.0, point.latitude + lat_offset)),  # type: ignore
        longitude=min(180.0, max(-180.0, point.longitude + lng_offset)),  # type: ignore
    )


def calculate_bounds(points: Sequence[Coordinate]) -> Bounds:
    """Calculate the bounding box of a set of coordinates.

    Args:
        points: At least one coordinate

    Returns:
        Bounds with the northeast and southwest corners

    Raises:
        ValueError: If no points are given
    """
    if not points:
        raise ValueError("Cannot calculate bounds of an empty set of points")

    lats = [p.latitude for p in points]
    lngs = [p.longitude for p in points]

    return Bounds(
        northeast=Coordinate(latitude=max(lats), longitude=max(lngs)),  # type: ignore
        southwest=Coordinate(latitude=min(lats), longitude=min(lngs)),  # type: ignore
    )


def generate_steps(origin: Coordinate, destination: Coordinate) -> list[RouteStep]:
    """Split a straight-line route into depart, continue and arrive steps.

    The steps cover 60%, 30% and 10% of the total distance, each timed at
    walking pace.

    Args:
        origin: The starting point
        destination: The end point

    Returns:
        Three route steps in travel order
    """
    total_distance = haversine_distance(origin, destination) * METERS_PER_KM
    midpoint = Coordinate(
        latitude=(origin.latitude + destination.latitude) / 2,  # type: ignore
        longitude=(origin.longitude + destination.longitude) / 2,  # type: ignore
    )
    depart_share, continue_share, arrive_share = STEP_DISTANCE_SHARES

    def step_duration(distance: float) -> int:
        return round(distance / STEP_WALKING_SPEED_MPS)

    return [
        RouteStep(
            instruction="Head towards your destination",
            distance=total_distance * depart_share,
            duration=step_duration(total_distance * depart_share),
            coordinates=[origin, midpoint],
            maneuver=Maneuver(type=ManeuverType.DEPART),
        ),
        RouteStep(
            instruction="Continue straight",
            distance=total_distance * continue_share,
            duration=step_duration(total_distance * continue_share),
            coordinates=[
                midpoint,
                offset_coordinate(midpoint, STEP_OFFSET_DEGREES, STEP_OFFSET_DEGREES),
            ],
            maneuver=Maneuver(type=ManeuverType.CONTINUE, modifier="straight"),
        ),
        RouteStep(
            instruction="Arrive at your destination",
            distance=total_distance * arrive_share,
            duration=step_duration(total_distance * arrive_share),
            coordinates=[
                offset_coordinate(
                    destination, -STEP_OFFSET_DEGREES, -STEP_OFFSET_DEGREES
                ),
                destination,
            ],
            maneuver=Maneuver(type=ManeuverType.ARRIVE),
        ),
    ]


def get_emergency_instructions(emergency_type: EmergencyType) -> list[str]:
    """Look up evacuation instructions for an emergency type.

    Unknown types fall back to the fire instructions.
    """
    value = getattr(emergency_type, "value", emergency_type)
    instructions = EMERGENCY_INSTRUCTIONS.get(value)
    if instructions is None:
        logger.warning(f"No instructions for emergency type {value!r}, using fire")
        instructions = EMERGENCY_INSTRUCTIONS[EmergencyType.FIRE.value]

    return list(instructions)
