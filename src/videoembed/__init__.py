"""Detect YouTube, Vimeo and Dailymotion URLs and render embeds or thumbnails."""

__version__ = "0.1.0"

import logging

from .resolver import embed, image, image_async, info, video_source
from .exceptions import (
    InvalidUsageError,
    MalformedUrlError,
    NotFoundError,
    UpstreamError,
    VideoEmbedError,
)
from .providers import dailymotion, get_provider, vimeo, youtube
from .schemas import EmbedOptions, ImageOptions, ImageResult, Provider, VideoReference

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EmbedOptions",
    "ImageOptions",
    "ImageResult",
    "InvalidUsageError",
    "MalformedUrlError",
    "NotFoundError",
    "Provider",
    "UpstreamError",
    "VideoEmbedError",
    "VideoReference",
    "dailymotion",
    "embed",
    "get_provider",
    "image",
    "image_async",
    "info",
    "video_source",
    "vimeo",
    "youtube",
]
