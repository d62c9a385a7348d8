"""This module defines the FastAPI router for video detection, embeds and thumbnails."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from videoembed import EmbedOptions, ImageOptions, ImageResult, VideoReference
from videoembed import embed as render_embed
from videoembed import image_async, info

from ..server_config import EMBED_RATE_LIMIT, IMAGE_RATE_LIMIT, INFO_RATE_LIMIT
from ..server_utils import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

NO_VIDEO_FOUND = "No supported video found at this URL"


class EmbedRequest(BaseModel):
    """Schema for an embed request body."""

    url: str
    query: Optional[Dict[str, Any]] = None
    attr: Optional[Dict[str, Any]] = None


class EmbedResponse(BaseModel):
    html: str


@router.get("/info", response_model=VideoReference)
@limiter.limit(INFO_RATE_LIMIT)
async def video_info(
    request: Request,
    url: str = Query(..., description="YouTube, Vimeo or Dailymotion URL"),
) -> VideoReference:
    """
    Detect the video referenced by a URL.

    Parameters
    ----------
    request : Request
        The incoming request object, required by the rate limiter.
    url : str
        The URL to inspect.

    Returns
    -------
    VideoReference
        Provider, id, canonical URL and embed URL of the video.
    """
    reference = info(url)
    if reference is None:
        raise HTTPException(status_code=404, detail=NO_VIDEO_FOUND)
    return reference


@router.post("/embed", response_model=EmbedResponse)
@limiter.limit(EMBED_RATE_LIMIT)
async def video_embed(request: Request, body: EmbedRequest) -> EmbedResponse:
    """
    Render the iframe HTML for a video URL.

    Parameters
    ----------
    request : Request
        The incoming request object, required by the rate limiter.
    body : EmbedRequest
        The video URL plus optional iframe query parameters and attributes.

    Returns
    -------
    EmbedResponse
        The rendered iframe.
    """
    html = render_embed(body.url, EmbedOptions(query=body.query, attr=body.attr))
    if html is None:
        raise HTTPException(status_code=404, detail=NO_VIDEO_FOUND)
    return EmbedResponse(html=html)


@router.get("/image", response_model=ImageResult)
@limiter.limit(IMAGE_RATE_LIMIT)
async def video_image(
    request: Request,
    url: str = Query(..., description="YouTube, Vimeo or Dailymotion URL"),
    image: Optional[str] = Query(None, description="Thumbnail variant, e.g. hqdefault"),
) -> ImageResult:
    """Resolve the thumbnail of a video URL."""
    result = await image_async(url, ImageOptions(image=image))
    if result is None:
        raise HTTPException(status_code=404, detail=NO_VIDEO_FOUND)
    logger.info("Resolved thumbnail for %s: %s", url, result.src)
    return result
