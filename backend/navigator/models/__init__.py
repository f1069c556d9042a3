from .models import (AlternativeEntrance, Bounds, EmergencyContact,
                     EmergencyRoute, EmergencyType, EvacuationRoute, Maneuver,
                     ManeuverType, OptimizedRoute, PrimaryEvacuationRoute,
                     Route, RouteSegment, RouteStep, SegmentEstimate, TourRoute,
                     TourStop, TravelMode)
from .api import (CampusToursResponse, DirectionsRequest, DirectionsResponse,
                  EmergencyRouteResponse, ErrorResponse, OptimizedRouteResponse,
                  OptimizeRequest)
