"""
Responses for requests that do not reach the relay route.

Starlette raises ``HTTPException(404)`` for unknown paths and
``HTTPException(405, headers={"Allow": ...})`` for known paths with the wrong
method. Both are rendered here, never with the relay's CORS or XML headers.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("uvicorn.error")


async def fallback_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    logger.debug(f"[Fallback] {request.method} {request.url.path} -> {exc.status_code}")
    return JSONResponse(
        {"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
