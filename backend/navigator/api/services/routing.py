import logging
from typing import Optional, Sequence

from pydantic_extra_types.coordinate import Coordinate

from navigator.config.constants import (ACCESSIBILITY_WARNINGS,
                                        ASSEMBLY_POINTS, CAMPUS_TOURS,
                                        EMERGENCY_CONTACTS,
                                        STEP_OFFSET_DEGREES)
from navigator.models import (AlternativeEntrance, EmergencyContact,
                              EmergencyRoute, EmergencyType, EvacuationRoute,
                              OptimizedRoute, PrimaryEvacuationRoute, Route,
                              TourRoute, TravelMode)
from navigator.planner import estimate_segment, optimize_waypoint_order
from navigator.utils import (calculate_bounds, encode_polyline, generate_steps,
                             get_emergency_instructions, offset_coordinate)

logger = logging.getLogger(__name__)


class RoutingService:
    """Builds campus routes on top of the waypoint planner.

    Holds no per-request state, so one instance serves every request.
    """

    def __init__(self):
        self._assembly_points = [
            (point["name"], Coordinate(**point["coordinates"]))
            for point in ASSEMBLY_POINTS
        ]
        self._tours = [TourRoute.model_validate(tour) for tour in CAMPUS_TOURS]
        logger.info(
            f"RoutingService initialized with {len(self._assembly_points)} assembly points "
            f"and {len(self._tours)} tours"
        )

    def calculate_route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        mode: TravelMode = TravelMode.WALKING,
        accessibility: bool = False,
    ) -> Route:
        """Calculate a straight-line route between two points.

        Args:
            origin: The starting point
            destination: The end point
            mode: Travel mode used for the duration estimate
            accessibility: Whether to flag the route as accessibility-friendly

        Returns:
            Route with distance, duration, steps, polyline and bounds
        """
        estimate = estimate_segment(origin, destination, mode)

        route = Route(
            origin=origin,
            destination=destination,
            mode=mode,
            accessibility=accessibility,
            distance=estimate.distance_meters,
            duration=estimate.duration_seconds,
            steps=generate_steps(origin, destination),
            polyline=encode_polyline([origin, destination]),
            bounds=calculate_bounds([origin, destination]),
            warnings=["Route optimized for accessibility"] if accessibility else None,
        )

        logger.info(
            f"Calculated {TravelMode(mode).value} route: "
            f"{route.distance:.0f}m, {route.duration}s"
        )
        return route

    def optimize_route(
        self, waypoints: Sequence[Coordinate], mode: TravelMode = TravelMode.WALKING
    ) -> OptimizedRoute:
        """Reorder waypoints into a short visiting order.

        Raises:
            InvalidInputError: If fewer than two waypoints are given
        """
        route = optimize_waypoint_order(waypoints, mode)

        logger.info(
            f"Optimized {len(waypoints)} waypoints: "
            f"{route.total_distance_meters:.0f}m, {route.total_duration_seconds}s"
        )
        return route

    def get_accessibility_route(
        self, origin: Coordinate, destination: Coordinate
    ) -> Route:
        """Calculate a walking route suited to wheelchair users.

        Adds accessibility warnings and an alternative step-free entrance
        just south of the destination.
        """
        route = self.calculate_route(
            origin, destination, TravelMode.WALKING, accessibility=True
        )

        route.warnings = (route.warnings or []) + ACCESSIBILITY_WARNINGS
        route.alternative_entrances = [
            AlternativeEntrance(
                building="Target Building",
                entrance="South entrance with automatic doors and ramp access",
                coordinates=offset_coordinate(destination, -STEP_OFFSET_DEGREES, 0),
            )
        ]

        return route

    def get_emergency_routes(
        self, location: Coordinate, emergency_type: EmergencyType = EmergencyType.FIRE
    ) -> EmergencyRoute:
        """Get evacuation routes from a location to the campus assembly points.

        The first assembly point is always the primary destination; the rest
        are listed as alternatives.

        Args:
            location: Where the user currently is
            emergency_type: Kind of emergency, selects the instructions

        Returns:
            EmergencyRoute with primary and alternative routes plus contacts
        """
        evacuation_routes = []
        for name, coordinates in self._assembly_points:
            estimate = estimate_segment(location, coordinates, TravelMode.WALKING)
            evacuation_routes.append(
                {
                    "destination": name,
                    "coordinates": coordinates,
                    "distance": estimate.distance_meters,
                    "duration": estimate.duration_seconds,
                }
            )

        primary, *alternatives = evacuation_routes

        logger.info(
            f"Emergency routes for {getattr(emergency_type, 'value', emergency_type)}: "
            f"primary {primary['destination']} at {primary['distance']:.0f}m"
        )

        return EmergencyRoute(
            primary_route=PrimaryEvacuationRoute(
                **primary, instructions=get_emergency_instructions(emergency_type)
            ),
            alternative_routes=[EvacuationRoute(**route) for route in alternatives],
            emergency_contacts=[
                EmergencyContact(**contact) for contact in EMERGENCY_CONTACTS
            ],
        )

    def get_campus_tours(
        self, duration: Optional[int] = None, interests: Optional[list[str]] = None
    ) -> list[TourRoute]:
        """List campus tours, optionally filtered.

        Args:
            duration: Maximum tour length in minutes
            interests: Keywords; a tour matches if any keyword appears in its
                description or in one of its stop descriptions

        Returns:
            Matching tours in catalogue order
        """
        tours = self._tours

        if duration:
            tours = [tour for tour in tours if tour.duration <= duration]

        if interests:
            keywords = [interest.lower() for interest in interests]
            tours = [
                tour
                for tour in tours
                if any(
                    keyword in tour.description.lower()
                    or any(keyword in stop.description.lower() for stop in tour.stops)
                    for keyword in keywords
                )
            ]

        return [tour.model_copy(deep=True) for tour in tours]
