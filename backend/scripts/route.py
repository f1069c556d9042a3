from pprint import pprint

from pydantic_extra_types.coordinate import Coordinate

from navigator.api.services import RoutingService
from navigator.models import TravelMode

service = RoutingService()

tour = service.get_campus_tours()[0]
waypoints = [stop.coordinates for stop in tour.stops if stop.coordinates]

optimized = service.optimize_route(waypoints, TravelMode.WALKING)

print(f"{tour.name}: visiting order {optimized.order}")
pprint(optimized.model_dump(by_alias=True))

directions = service.calculate_route(
    Coordinate(latitude=34.7270, longitude=-79.0187),  # type: ignore
    Coordinate(latitude=34.7265, longitude=-79.0175),  # type: ignore
    TravelMode.CYCLING,
)

pprint(directions.model_dump())
