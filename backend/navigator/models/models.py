from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_extra_types.coordinate import Coordinate


class TravelMode(str, Enum):
    """Ways of getting around campus."""
    WALKING = "walking"
    DRIVING = "driving"
    CYCLING = "cycling"


class EmergencyType(str, Enum):
    """Kinds of campus emergency with their own evacuation guidance."""
    FIRE = "fire"
    MEDICAL = "medical"
    SECURITY = "security"
    WEATHER = "weather"


class ManeuverType(str, Enum):
    DEPART = "depart"
    CONTINUE = "continue"
    TURN = "turn"
    ARRIVE = "arrive"


class Maneuver(BaseModel):
    type: ManeuverType
    modifier: Optional[str] = None


class RouteStep(BaseModel):
    instruction: str
    distance: float = Field(..., ge=0, description="Step distance in meters")
    duration: int = Field(..., ge=0, description="Step duration in seconds")
    coordinates: list[Coordinate]
    maneuver: Optional[Maneuver] = None


class Bounds(BaseModel):
    northeast: Coordinate
    southwest: Coordinate


class AlternativeEntrance(BaseModel):
    building: str
    entrance: str
    coordinates: Coordinate


class Route(BaseModel):
    origin: Coordinate
    destination: Coordinate
    mode: TravelMode
    accessibility: bool = False
    distance: float = Field(..., ge=0, description="Total distance in meters")
    duration: int = Field(..., ge=0, description="Total duration in seconds")
    steps: list[RouteStep] = []
    polyline: str
    bounds: Bounds
    warnings: Optional[list[str]] = None
    alternative_entrances: Optional[list[AlternativeEntrance]] = None


class SegmentEstimate(BaseModel):
    """Distance and travel time between two points."""

    distance_meters: float
    duration_seconds: int


class RouteSegment(BaseModel):
    """One leg of an optimised route, between consecutive waypoints."""

    model_config = ConfigDict(populate_by_name=True)

    from_: Coordinate = Field(alias="from")
    to: Coordinate
    distance_meters: float
    duration_seconds: int


class OptimizedRoute(BaseModel):
    """Waypoints reordered into a short visiting order.

    `order` holds indices into `waypoints`; `segments` follow that order.
    """

    waypoints: list[Coordinate]
    order: list[int]
    segments: list[RouteSegment]
    total_distance_meters: float
    total_duration_seconds: int
    mode: TravelMode


class EmergencyContact(BaseModel):
    service: str
    phone: str


class EvacuationRoute(BaseModel):
    destination: str
    coordinates: Coordinate
    distance: float = Field(..., description="Distance in meters")
    duration: int = Field(..., description="Walking time in seconds")


class PrimaryEvacuationRoute(EvacuationRoute):
    instructions: list[str]


class EmergencyRoute(BaseModel):
    primary_route: PrimaryEvacuationRoute
    alternative_routes: list[EvacuationRoute] = []
    emergency_contacts: list[EmergencyContact] = []


class TourStop(BaseModel):
    id: str
    name: str
    duration: int = Field(..., description="Time to spend at the stop in minutes")
    description: str
    coordinates: Optional[Coordinate] = None


class TourRoute(BaseModel):
    id: str
    name: str
    duration: int = Field(..., description="Tour length in minutes")
    distance: float = Field(..., description="Tour length in kilometers")
    description: str
    stops: list[TourStop] = []
    polyline: Optional[str] = None
