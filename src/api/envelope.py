"""
Envelope emitter - Serializes envelopes into JSON responses.
"""

import logging
from collections.abc import Mapping

from fastapi import Response
from pydantic_core import PydanticSerializationError

from src.api.models import Envelope

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def respond_json(
    status_code: int,
    envelope: Envelope,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """
    Build a JSON response for an envelope.

    Serialization failures are logged and the body is abandoned: the
    response keeps its status and content type but carries no bytes.
    There is no further channel to report the failure to the client.

    Args:
        status_code: HTTP status to send
        envelope: Envelope to serialize
        headers: Extra headers (e.g. Allow on 405)

    Returns:
        Response with Content-Type application/json
    """
    try:
        body = envelope.model_dump_json(exclude_none=True)
    except (PydanticSerializationError, TypeError):
        logger.exception("Error encoding JSON response (status=%s)", status_code)
        body = b""

    return Response(
        content=body,
        status_code=status_code,
        headers=dict(headers) if headers else None,
        media_type=JSON_MEDIA_TYPE,
    )
