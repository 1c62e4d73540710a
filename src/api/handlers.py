"""
Route handlers - Greeting, health check and echo.

Each handler runs its gates in order and short-circuits on the first
failure; gate errors are turned into envelopes by the registered
exception handlers.
"""

import logging

from fastapi import Depends, Request, Response, status

from src.api.dependencies import get_pingme_service
from src.api.envelope import respond_json
from src.api.gates import decode_echo_request, require_json_content_type, require_method
from src.api.models import EchoData, Envelope, GreetingData, HealthData
from src.domain.exceptions import EmptyMessage
from src.domain.pingme import PingMeService

logger = logging.getLogger(__name__)


async def greeting(
    request: Request,
    service: PingMeService = Depends(get_pingme_service),
) -> Response:
    """Return the welcome greeting. GET only."""
    require_method(request, "GET")

    data = GreetingData.model_validate(service.greet())
    return respond_json(
        status.HTTP_200_OK,
        Envelope.ok("Greeting retrieved successfully", data),
    )


async def health(
    request: Request,
    service: PingMeService = Depends(get_pingme_service),
) -> Response:
    """Liveness probe. GET only, no I/O."""
    require_method(request, "GET")

    data = HealthData.model_validate(service.check_health())
    return respond_json(status.HTTP_200_OK, Envelope.ok("Service is healthy", data))


async def echo(
    request: Request,
    service: PingMeService = Depends(get_pingme_service),
) -> Response:
    """
    Echo a JSON message back with an "Echo: " prefix.

    Gates, in order:
    - **method**: POST only (405)
    - **content type**: exactly application/json (415)
    - **decode**: body is {"message": string} with no other keys (400)
    - **content**: message is not the empty string (400)
    """
    require_method(request, "POST")
    require_json_content_type(request)
    payload = await decode_echo_request(request)

    try:
        result = service.echo(payload.message)
    except EmptyMessage as exc:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return respond_json(status.HTTP_400_BAD_REQUEST, Envelope.fail(str(exc)))

    return respond_json(
        status.HTTP_200_OK,
        Envelope.ok("Echo processed successfully", EchoData.model_validate(result)),
    )
