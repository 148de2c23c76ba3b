"""Operational endpoints: route table, health and environment."""

from fastapi import APIRouter, Request
from fastapi.routing import APIRoute

from gymlog.app.env_loader import get_current_environment
from gymlog.app.models import EnvironmentResponse, RouteInfo

router = APIRouter(tags=["meta"])


@router.get("/", response_model=list[RouteInfo])
def list_routes(request: Request) -> list[RouteInfo]:
    """List every API route registered on the app.

    A diagnostic convenience; the shape is not a stable contract.
    """
    return [
        RouteInfo(path=route.path, methods=sorted(route.methods))
        for route in request.app.routes
        if isinstance(route, APIRoute)
    ]


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/environment", response_model=EnvironmentResponse)
def read_environment() -> EnvironmentResponse:
    return EnvironmentResponse(environment=get_current_environment())
