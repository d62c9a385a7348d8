"""Configuration for the video embed preview server."""

from typing import Dict, List

INFO_RATE_LIMIT: str = "60/minute"
EMBED_RATE_LIMIT: str = "60/minute"
# Image lookups may hit the Vimeo/Dailymotion APIs, so they get a tighter budget.
IMAGE_RATE_LIMIT: str = "20/minute"

EXAMPLE_VIDEOS: List[Dict[str, str]] = [
    {"name": "YouTube", "url": "https://www.youtube.com/watch?v=_uQrJ0TkZlc"},
    {"name": "YouTube short link", "url": "https://youtu.be/7t2alSnE2-I"},
    {"name": "Vimeo", "url": "https://vimeo.com/76979871"},
    {"name": "Vimeo channel", "url": "https://vimeo.com/channels/staff/76979871"},
    {"name": "Dailymotion", "url": "https://www.dailymotion.com/video/x2p4qyf_title"},
]
