from .routing import RoutingService
