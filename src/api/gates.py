"""
Request gates - Sequential validation steps applied before business logic.

Each gate either returns normally or raises an ApiError. Handlers call
them cheapest first: method, then headers, then body.
"""

from fastapi import Request
from pydantic import ValidationError

from src.api.errors import MalformedBody, MethodNotAllowed, UnsupportedMediaType
from src.api.models import EchoRequest

JSON_CONTENT_TYPE = "application/json"


def require_method(request: Request, allowed: str) -> None:
    """Reject any verb other than the one the route accepts."""
    if request.method != allowed:
        raise MethodNotAllowed(allowed)


def require_json_content_type(request: Request) -> None:
    """
    Require Content-Type to be exactly application/json.

    Parameters such as charset, other casing, and a missing header all fail.
    """
    if request.headers.get("content-type", "") != JSON_CONTENT_TYPE:
        raise UnsupportedMediaType()


def describe_validation_error(exc: ValidationError) -> str:
    """
    Render decoder errors as a single diagnostic line.

    Syntax errors report the parser position; model errors report
    "field: reason". Multiple errors are joined with "; ".
    """
    parts = []
    for error in exc.errors(include_url=False):
        if error["type"] == "json_invalid":
            parts.append(error.get("ctx", {}).get("error", error["msg"]))
            continue
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


async def decode_echo_request(request: Request) -> EchoRequest:
    """
    Read and strictly decode the echo request body.

    An empty body is a decode failure like any other malformed input.

    Raises:
        MalformedBody: If the body is not a JSON object matching EchoRequest
    """
    body = await request.body()
    try:
        return EchoRequest.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedBody(describe_validation_error(exc)) from None
