import logging
from typing import Sequence

from pydantic_extra_types.coordinate import Coordinate

from navigator.config.constants import MIN_WAYPOINTS
from navigator.models import OptimizedRoute, RouteSegment, TravelMode
from navigator.planner.distance import estimate_segment, haversine_distance
from navigator.planner.errors import InvalidInputError

logger = logging.getLogger(__name__)


def nearest_neighbour_order(waypoints: Sequence[Coordinate]) -> list[int]:
    """Order waypoints greedily by always moving to the closest unvisited one.

    The first waypoint is always the start. When two candidates are exactly
    as close, the one with the lower original index wins.

    Args:
        waypoints: Points to visit

    Returns:
        A permutation of the waypoint indices starting with 0
    """
    unvisited = list(range(len(waypoints)))
    order = [unvisited.pop(0)]

    while unvisited:
        current = waypoints[order[-1]]
        nearest = 0
        nearest_distance = float("inf")

        # unvisited stays in ascending index order, so strict < keeps the lowest index on ties
        for position, index in enumerate(unvisited):
            distance = haversine_distance(current, waypoints[index])
            if distance < nearest_distance:
                nearest_distance = distance
                nearest = position

        order.append(unvisited.pop(nearest))

    return order


def optimize_waypoint_order(
    waypoints: Sequence[Coordinate], mode: TravelMode = TravelMode.WALKING
) -> OptimizedRoute:
    """Reorder waypoints into a short visiting order and estimate each leg.

    This is the nearest-neighbour heuristic, not an exact solver: the
    result is a reasonable order, not necessarily the shortest one.

    Args:
        waypoints: Points to visit, first one being the fixed start
        mode: Travel mode used for duration estimates

    Returns:
        OptimizedRoute with the visiting order, per-leg segments and totals

    Raises:
        InvalidInputError: If fewer than two waypoints are given
    """
    if len(waypoints) < MIN_WAYPOINTS:
        raise InvalidInputError(
            f"At least {MIN_WAYPOINTS} waypoints are required, got {len(waypoints)}"
        )

    if len(waypoints) == 2:
        order = [0, 1]
    else:
        order = nearest_neighbour_order(waypoints)

    # results never share Coordinate objects with the caller
    points = [
        Coordinate(latitude=p.latitude, longitude=p.longitude)  # type: ignore
        for p in waypoints
    ]

    segments = []
    total_distance = 0.0
    total_duration = 0

    for start, end in zip(order, order[1:]):
        estimate = estimate_segment(points[start], points[end], mode)
        segments.append(
            RouteSegment(
                from_=points[start],
                to=points[end],
                distance_meters=estimate.distance_meters,
                duration_seconds=estimate.duration_seconds,
            )
        )
        total_distance += estimate.distance_meters
        total_duration += estimate.duration_seconds

    logger.debug(f"Optimised {len(waypoints)} waypoints into order {order}")

    return OptimizedRoute(
        waypoints=points,
        order=order,
        segments=segments,
        total_distance_meters=total_distance,
        total_duration_seconds=total_duration,
        mode=mode,
    )
