"""Response Envelope — uniform JSON success/error responses.

Invariants:
    - Content-Type is always application/json; charset=utf-8
    - Error bodies have exactly one key: {"error": message}
    - A payload that cannot be serialized yields a 500 with an empty body,
      never a partial document
    - Causes are logged server-side only; they never reach the body

Design Decisions:
    - Serialize eagerly (jsonable_encoder + json.dumps) instead of handing the
      payload to JSONResponse: the failure path must be decided before any
      status line is chosen
    - allow_nan=False: NaN/Infinity are not valid JSON and count as failures
"""

import json
import logging
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import Response

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def write_json(status_code: int, payload: Any) -> Response:
    """Serialize payload and wrap it in a response with status_code."""
    try:
        content = json.dumps(
            jsonable_encoder(payload), ensure_ascii=False, allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        logger.error(
            f"Failed to serialize response payload {payload!r}: {e}",
            extra={"status_code": status_code},
        )
        return Response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            media_type=JSON_MEDIA_TYPE,
        )
    return Response(
        content=content, status_code=status_code, media_type=JSON_MEDIA_TYPE,
    )


def write_error(
    status_code: int, message: str, cause: BaseException | None = None,
) -> Response:
    """Log cause (and a 5XX marker for server errors), then emit {"error": message}."""
    if cause is not None:
        logger.error(
            f"An error has occurred: {cause!r}",
            exc_info=(
                (type(cause), cause, cause.__traceback__)
                if status_code >= 500 and cause.__traceback__ else None
            ),
            extra={"status_code": status_code},
        )
    if status_code >= 500:
        logger.warning(
            f"Responding with 5XX error: {message}",
            extra={"status_code": status_code},
        )
    return write_json(status_code, {"error": message})
