from pydantic import BaseModel

from .env_loader import EnvironmentName


class EnvironmentResponse(BaseModel):
    """Response model for the environment endpoint."""

    environment: EnvironmentName


class RouteInfo(BaseModel):
    """One entry of the route table served at GET /."""

    path: str
    methods: list[str]
