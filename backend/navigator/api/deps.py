from typing import Annotated

from fastapi import Depends, Request

from navigator.api.services import RoutingService


async def get_routing_service(request: Request) -> RoutingService:
    return request.app.state.routing_service


RoutingServiceDep = Annotated[RoutingService, Depends(get_routing_service)]
