"""Dailymotion embeds and thumbnails via the Dailymotion data API."""

import logging

from ..exceptions import NotFoundError
from ..schemas.video_schema import ImageResult, Provider
from .base import ImageOptionsArg, VideoProvider

logger = logging.getLogger(__name__)

_VIDEO_API_URL = "https://api.dailymotion.com/video/{id}?fields={fields}"


class DailymotionProvider(VideoProvider):
    source = Provider.DAILYMOTION
    embed_template = "//www.dailymotion.com/embed/video/{id}"
    image_variants = (
        "thumbnail_60_url",
        "thumbnail_120_url",
        "thumbnail_180_url",
        "thumbnail_240_url",
        "thumbnail_360_url",
        "thumbnail_480_url",
        "thumbnail_720_url",
        "thumbnail_1080_url",
    )
    default_image = "thumbnail_480_url"

    async def fetch_image(self, video_id: str, options: ImageOptionsArg = None) -> ImageResult:
        """Look up a thumbnail, asking the API for the requested field only."""
        variant = self.image_options(options).image
        body = await self._get_json(_VIDEO_API_URL.format(id=video_id, fields=variant))

        src = body.get(variant) if isinstance(body, dict) else None
        if not src or not isinstance(src, str):
            logger.warning("No %s in dailymotion response for %s", variant, video_id)
            raise NotFoundError(f"no image found for dailymotion.com/{video_id}")

        return self.build_image_result(src)
