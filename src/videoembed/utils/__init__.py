"""Utilities package for URL matching, option serialization and HTTP access."""

from .options import image_tag, parse_options, serialize_attributes, serialize_query
from .url_matcher import VideoURLMatcher, canonicalize_url, match_video_url, parse_url

__all__ = [
    "VideoURLMatcher",
    "canonicalize_url",
    "image_tag",
    "match_video_url",
    "parse_options",
    "parse_url",
    "serialize_attributes",
    "serialize_query",
]
