"""Server utilities for the video embed preview application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address

from videoembed import (
    InvalidUsageError,
    MalformedUrlError,
    NotFoundError,
    UpstreamError,
    VideoEmbedError,
)
from videoembed.config import settings

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> str:
    """
    Get the client IP address from the request.

    Parameters
    ----------
    request : Request
        The incoming HTTP request.

    Returns
    -------
    str
        The client IP address.
    """
    return get_remote_address(request)


# Initialize the rate limiter
limiter = Limiter(key_func=get_client_ip)


async def rate_limit_exception_handler(request: Request, exc):
    """Handle rate limit exceeded exceptions."""
    return await _rate_limit_exceeded_handler(request, exc)


def status_for_error(exc: VideoEmbedError) -> int:
    """Map a library error onto the HTTP status returned to clients."""
    if isinstance(exc, (MalformedUrlError, InvalidUsageError)):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, UpstreamError):
        return 502
    return 500


async def video_embed_exception_handler(request: Request, exc: VideoEmbedError) -> JSONResponse:
    """
    Turn library errors raised inside a route into JSON error responses.

    Parameters
    ----------
    request : Request
        The incoming HTTP request.
    exc : VideoEmbedError
        The error raised by the route.

    Returns
    -------
    JSONResponse
        ``{"detail": <message>}`` with the mapped status code.
    """
    status_code = status_for_error(exc)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@asynccontextmanager
async def lifespan(app) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Parameters
    ----------
    app : FastAPI
        The FastAPI application instance.

    Yields
    ------
    None
        Yields control during application lifetime.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Video embed preview server starting up...")

    yield

    logger.info("Video embed preview server shutting down...")
