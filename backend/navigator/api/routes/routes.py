"""API routes for campus navigation."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query
from pydantic_extra_types.coordinate import Coordinate

from navigator.api.deps import RoutingServiceDep
from navigator.config import settings
from navigator.config.constants import (MAX_TOUR_DURATION, MIN_TOUR_DURATION,
                                        VALID_TOUR_INTERESTS)
from navigator.models import (CampusToursResponse, DirectionsRequest,
                              DirectionsResponse, EmergencyRouteResponse,
                              EmergencyType, OptimizedRouteResponse,
                              OptimizeRequest)
from navigator.planner import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes")


@router.post("/directions", response_model=DirectionsResponse)
def get_directions(routing_service: RoutingServiceDep, request: DirectionsRequest):
    """Calculate a route between two points.

    Args:
        request: DirectionsRequest with origin, destination, mode and accessibility flag

    Returns:
        DirectionsResponse wrapping the calculated route
    """
    route = routing_service.calculate_route(
        request.origin,
        request.destination,
        request.mode or settings.DEFAULT_TRAVEL_MODE,
        request.accessibility,
    )
    return DirectionsResponse(route=route)


@router.post("/optimize", response_model=OptimizedRouteResponse)
def optimize_route(routing_service: RoutingServiceDep, request: OptimizeRequest):
    """Reorder 2-10 waypoints into a short visiting order.

    The first waypoint is kept as the start of the route.
    """
    route = routing_service.optimize_route(
        request.waypoints, request.mode or settings.DEFAULT_TRAVEL_MODE
    )
    return OptimizedRouteResponse(route=route)


@router.get("/accessibility", response_model=DirectionsResponse)
def get_accessibility_route(
    routing_service: RoutingServiceDep,
    origin_lat: Annotated[float, Query(alias="origin.lat", ge=-90, le=90)],
    origin_lng: Annotated[float, Query(alias="origin.lng", ge=-180, le=180)],
    destination_lat: Annotated[float, Query(alias="destination.lat", ge=-90, le=90)],
    destination_lng: Annotated[float, Query(alias="destination.lng", ge=-180, le=180)],
):
    """Get a wheelchair-friendly walking route between two points."""
    route = routing_service.get_accessibility_route(
        Coordinate(latitude=origin_lat, longitude=origin_lng),  # type: ignore
        Coordinate(latitude=destination_lat, longitude=destination_lng),  # type: ignore
    )
    return DirectionsResponse(route=route)


@router.get("/emergency", response_model=EmergencyRouteResponse)
def get_emergency_routes(
    routing_service: RoutingServiceDep,
    location_lat: Annotated[float, Query(alias="location.lat", ge=-90, le=90)],
    location_lng: Annotated[float, Query(alias="location.lng", ge=-180, le=180)],
    emergency_type: Annotated[EmergencyType, Query(alias="type")] = EmergencyType.FIRE,
):
    """Get evacuation routes from a location to the assembly points."""
    routes = routing_service.get_emergency_routes(
        Coordinate(latitude=location_lat, longitude=location_lng),  # type: ignore
        emergency_type,
    )
    return EmergencyRouteResponse(routes=routes)


@router.get("/campus-tour", response_model=CampusToursResponse)
def get_campus_tours(
    routing_service: RoutingServiceDep,
    duration: Annotated[
        Optional[int], Query(ge=MIN_TOUR_DURATION, le=MAX_TOUR_DURATION)
    ] = None,
    interests: Optional[str] = None,
):
    """List the predefined campus tours.

    Args:
        duration: Maximum tour length in minutes
        interests: Comma separated list of academic, history, recreation, dining

    Raises:
        InvalidInputError: If an interest is not a known category
    """
    interest_list = None
    if interests:
        interest_list = [interest.strip() for interest in interests.split(",")]
        unknown = [i for i in interest_list if i not in VALID_TOUR_INTERESTS]
        if unknown:
            raise InvalidInputError(f"Invalid interest categories: {', '.join(unknown)}")

    tours = routing_service.get_campus_tours(duration, interest_list)
    logger.info(f"Returning {len(tours)} campus tours")
    return CampusToursResponse(tours=tours)
