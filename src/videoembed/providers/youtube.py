"""YouTube embeds and thumbnails. Thumbnails are computed, not fetched."""

from typing import Any, Optional
from urllib.parse import quote

from ..schemas.video_schema import ImageResult, Provider
from .base import ImageCallback, ImageOptionsArg, VideoProvider, schedule


class YouTubeProvider(VideoProvider):
    source = Provider.YOUTUBE
    embed_template = "//www.youtube.com/embed/{id}"
    image_variants = ("default", "mqdefault", "hqdefault", "sddefault", "maxresdefault")
    default_image = "default"

    def thumbnail(self, video_id: str, options: ImageOptionsArg = None) -> ImageResult:
        """Build the thumbnail for ``video_id`` without any network access."""
        variant = self.image_options(options).image
        encoded_id = quote(str(video_id), safe="")
        return self.build_image_result(f"//img.youtube.com/vi/{encoded_id}/{variant}.jpg")

    async def fetch_image(self, video_id: str, options: ImageOptionsArg = None) -> ImageResult:
        return self.thumbnail(video_id, options)

    def image(
        self,
        video_id: str,
        options: ImageOptionsArg = None,
        callback: Optional[ImageCallback] = None,
    ) -> Any:
        """
        Thumbnail lookup.

        Without a callback the ``<img>`` HTML is returned directly. With one, the
        result is delivered as ``callback(None, result)`` on a later loop turn
        and the scheduled task is returned.
        """
        if callback is None:
            return self.thumbnail(video_id, options).html
        return schedule(lambda: self.fetch_image(video_id, options), callback)
