from .utils import (calculate_bounds, encode_polyline, generate_steps,
                    get_emergency_instructions, offset_coordinate)
