"""Shared HTTP session for provider metadata lookups."""

from __future__ import annotations

import logging

import requests

from ..config import settings

logger = logging.getLogger(__name__)

# Single attempt per call: no retry adapter is mounted.
_session = requests.Session()
_HEADERS = {"Accept": "application/json", "User-Agent": settings.user_agent}


def get(url: str) -> requests.Response:
    """Issue a blocking GET against ``url`` using the shared session."""
    logger.debug("GET %s (timeout=%s)", url, settings.http_timeout)
    return _session.get(url, headers=_HEADERS, timeout=settings.http_timeout)
