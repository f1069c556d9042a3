from .distance import (estimate_duration, estimate_segment,
                       haversine_distance, travel_speed)
from .errors import InvalidInputError
from .optimiser import nearest_neighbour_order, optimize_waypoint_order
