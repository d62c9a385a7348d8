"""Top-level helpers: detect a video URL, then embed it or resolve its thumbnail."""

import logging
from typing import Any, Optional

from .providers import get_provider
from .providers.base import ImageCallback, ImageOptionsArg, OptionsArg, running_loop
from .schemas.video_schema import ImageResult, VideoReference
from .utils.url_matcher import VideoURLMatcher, canonicalize_url, parse_url

logger = logging.getLogger(__name__)


def info(url: str) -> Optional[VideoReference]:
    """
    Detect the video referenced by ``url``.

    Parameters
    ----------
    url : str
        Any absolute URL.

    Returns
    -------
    Optional[VideoReference]
        The detected video, or None if the URL belongs to no supported provider.

    Raises
    ------
    MalformedUrlError
        If ``url`` cannot be parsed.
    """
    parsed = parse_url(url)
    match = VideoURLMatcher.match_parsed(parsed)
    if match is None:
        logger.debug("No supported video provider for %s", url)
        return None

    video_id, source = match
    return VideoReference(
        id=video_id,
        source=source,
        url=canonicalize_url(parsed),
        embed_url=get_provider(source).embed_url(video_id),
    )


# Older name for ``info``.
video_source = info


def embed(url: str, options: OptionsArg = None) -> Optional[str]:
    """
    Render the iframe HTML for the video at ``url``.

    Parameters
    ----------
    url : str
        A YouTube, Vimeo or Dailymotion URL.
    options : OptionsArg
        ``{"query": {...}, "attr": {...}}`` passed to the provider renderer.

    Returns
    -------
    Optional[str]
        The iframe HTML, or None if no provider matches.
    """
    reference = info(url)
    if reference is None:
        return None
    return get_provider(reference.source).render(reference.id, options)


def image(
    url: str,
    options: ImageOptionsArg = None,
    callback: Optional[ImageCallback] = None,
) -> Any:
    """
    Callback-style thumbnail lookup for the video at ``url``.

    When nothing matches and a callback is given, the callback is invoked with
    no arguments on a later loop turn. Otherwise the call is delegated to the
    provider's ``image``: YouTube without a callback returns the ``<img>`` HTML,
    every other case delivers ``callback(error)`` or ``callback(None, result)``.
    """
    reference = info(url)
    if reference is None:
        if callback is not None:
            running_loop().call_soon(callback)
        return None
    return get_provider(reference.source).image(reference.id, options, callback)


async def image_async(url: str, options: ImageOptionsArg = None) -> Optional[ImageResult]:
    """
    Resolve the thumbnail of the video at ``url``.

    Returns
    -------
    Optional[ImageResult]
        The thumbnail, or None if no provider matches.

    Raises
    ------
    UpstreamError
        If the provider's metadata API fails.
    NotFoundError
        If the provider has no image for the requested variant.
    """
    reference = info(url)
    if reference is None:
        return None
    return await get_provider(reference.source).fetch_image(reference.id, options)
