"""Provider registry: one renderer/thumbnail resolver per supported service."""

from ..schemas.video_schema import Provider
from .base import VideoProvider
from .dailymotion import DailymotionProvider
from .vimeo import VimeoProvider
from .youtube import YouTubeProvider

youtube = YouTubeProvider()
vimeo = VimeoProvider()
dailymotion = DailymotionProvider()


def get_provider(source: Provider) -> VideoProvider:
    """Return the provider implementation for ``source``."""
    source = Provider(source)
    if source is Provider.YOUTUBE:
        return youtube
    if source is Provider.VIMEO:
        return vimeo
    if source is Provider.DAILYMOTION:
        return dailymotion
    raise ValueError(f"Unknown video provider: {source!r}")


__all__ = [
    "DailymotionProvider",
    "VideoProvider",
    "VimeoProvider",
    "YouTubeProvider",
    "dailymotion",
    "get_provider",
    "vimeo",
    "youtube",
]
