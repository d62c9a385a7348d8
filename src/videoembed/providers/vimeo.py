"""Vimeo embeds and thumbnails via the public v2 video API."""

import logging

from ..exceptions import NotFoundError
from ..schemas.video_schema import ImageResult, Provider
from .base import ImageOptionsArg, VideoProvider

logger = logging.getLogger(__name__)

_VIDEO_API_URL = "https://vimeo.com/api/v2/video/{id}.json"


class VimeoProvider(VideoProvider):
    source = Provider.VIMEO
    embed_template = "//player.vimeo.com/video/{id}"
    iframe_flags = "webkitallowfullscreen mozallowfullscreen allowfullscreen"
    image_variants = ("thumbnail_small", "thumbnail_medium", "thumbnail_large")
    default_image = "thumbnail_large"

    async def fetch_image(self, video_id: str, options: ImageOptionsArg = None) -> ImageResult:
        """
        Look up a thumbnail through ``vimeo.com/api/v2``.

        The API returns a one-element array whose thumbnail fields hold full
        URLs; the scheme is dropped so the image is protocol-relative.

        Raises
        ------
        UpstreamError
            On a non-200 answer, a transport failure or an undecodable body.
        NotFoundError
            If the response carries no usable value for the requested variant.
        """
        variant = self.image_options(options).image
        body = await self._get_json(_VIDEO_API_URL.format(id=video_id))

        value = None
        if isinstance(body, list) and body and isinstance(body[0], dict):
            value = body[0].get(variant)

        src = value.partition(":")[2] if isinstance(value, str) else ""
        if not src:
            logger.warning("No %s in vimeo response for %s", variant, video_id)
            raise NotFoundError(f"no image found for vimeo.com/{video_id}")

        return self.build_image_result(src)
