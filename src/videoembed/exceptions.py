"""Exceptions raised by the video embed helpers."""

from typing import Optional


class VideoEmbedError(Exception):
    """Base class for every error raised by this package."""


class MalformedUrlError(VideoEmbedError, ValueError):
    """The input could not be parsed as an absolute URL."""


class InvalidUsageError(VideoEmbedError, TypeError):
    """An API was called in a way it does not support, e.g. without a callback."""


class UpstreamError(VideoEmbedError):
    """A provider metadata API answered with something other than a usable 200."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(VideoEmbedError):
    """The provider answered, but the requested thumbnail is not in the response."""
