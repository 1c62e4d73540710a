"""
Route table - Explicit mapping of paths to handlers.

The table is built once and passed into application construction;
nothing registers routes as an import side effect.

Routes:
- GET  /        - Greeting
- GET  /healthz - Health check
- POST /echo    - Echo
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter

from src.api.handlers import echo, greeting, health
from src.api.models import Envelope

# Every verb reaches the handler so the method gate can answer 405 itself.
ALL_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


@dataclass(frozen=True)
class Route:
    """A single routed endpoint and the one verb it accepts."""

    path: str
    endpoint: Callable[..., Any]
    method: str
    summary: str
    description: str


ROUTES: tuple[Route, ...] = (
    Route(
        path="/",
        endpoint=greeting,
        method="GET",
        summary="Greeting",
        description="Return the PingMe welcome greeting with the current UTC time.",
    ),
    Route(
        path="/healthz",
        endpoint=health,
        method="GET",
        summary="Health check",
        description="Liveness/readiness probe. Side-effect free.",
    ),
    Route(
        path="/echo",
        endpoint=echo,
        method="POST",
        summary="Echo a message",
        description='Submit {"message": "..."} as application/json to have it '
        "echoed back with its length.",
    ),
)


def build_router(routes: Sequence[Route], tag: str = "pingme") -> APIRouter:
    """
    Build an APIRouter from a route table.

    The documented method appears in the OpenAPI schema; the remaining
    verbs are routed but hidden so they reach the method gate.
    """
    router = APIRouter(tags=[tag])
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=Envelope,
            summary=route.summary,
            description=route.description,
        )
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[m for m in ALL_METHODS if m != route.method],
            include_in_schema=False,
        )
    return router
