"""Request ID middleware for the Gamma tools API."""

import uuid

import structlog
from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"


async def request_id_middleware(request: Request, call_next):
    """Tag each request with an id, reusing the caller's X-Request-ID when given.

    The id is bound into structlog context for every log line emitted while
    the request runs, and echoed back in the response headers.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    with structlog.contextvars.bound_contextvars(request_id=request_id, path=request.url.path):
        response = await call_next(request)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
