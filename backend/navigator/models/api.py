from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic_extra_types.coordinate import Coordinate

from navigator.config.constants import MAX_WAYPOINTS, MIN_WAYPOINTS
from navigator.models.models import (EmergencyRoute, OptimizedRoute, Route,
                                     TourRoute, TravelMode)


class DirectionsRequest(BaseModel):
    """Request for directions between two points."""

    origin: Coordinate = Field(..., description="Starting point")
    destination: Coordinate = Field(..., description="End point")
    mode: Optional[TravelMode] = Field(
        default=None,
        description="How the route will be travelled. Defaults to the configured mode.",
    )
    accessibility: bool = Field(
        default=False, description="Prefer an accessibility-friendly route"
    )


class OptimizeRequest(BaseModel):
    """Request to reorder waypoints into a short visiting order."""

    waypoints: List[Coordinate] = Field(
        ...,
        min_length=MIN_WAYPOINTS,
        max_length=MAX_WAYPOINTS,
        description="Points to visit. The first waypoint is always the start.",
    )
    mode: Optional[TravelMode] = Field(
        default=None,
        description="How the route will be travelled. Defaults to the configured mode.",
    )


class DirectionsResponse(BaseModel):
    route: Route


class OptimizedRouteResponse(BaseModel):
    route: OptimizedRoute


class EmergencyRouteResponse(BaseModel):
    routes: EmergencyRoute


class CampusToursResponse(BaseModel):
    tours: List[TourRoute]


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: Optional[Any] = None
