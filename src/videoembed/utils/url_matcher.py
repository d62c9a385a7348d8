"""Detection of supported video URLs.

Maps an arbitrary URL to the provider that hosts it and the provider's
video id, using host names and path shapes only.
"""

import logging
import re
from typing import Optional, Tuple
from urllib.parse import SplitResult, parse_qs, urlsplit, urlunsplit

from ..exceptions import MalformedUrlError
from ..schemas.video_schema import Provider

logger = logging.getLogger(__name__)


def parse_url(url: str) -> SplitResult:
    """
    Split ``url`` into its components.

    Parameters
    ----------
    url : str
        An absolute (``scheme://host/...``) or protocol-relative (``//host/...``) URL.

    Returns
    -------
    SplitResult
        The parsed URL.

    Raises
    ------
    MalformedUrlError
        If ``url`` is not a string, cannot be parsed, or has no host.
    """
    if not isinstance(url, str):
        raise MalformedUrlError(f"Expected a URL string, got {type(url).__name__}")

    try:
        parsed = urlsplit(url.strip())
    except ValueError as exc:
        raise MalformedUrlError(f"Could not parse URL {url!r}: {exc}") from exc

    if not parsed.hostname:
        raise MalformedUrlError(f"URL {url!r} has no host")
    return parsed


def canonicalize_url(parsed: SplitResult) -> str:
    """Rebuild ``parsed`` with a lowercased scheme and host and a non-empty path."""
    userinfo, at, hostport = parsed.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{hostport.lower()}"
    return urlunsplit((
        parsed.scheme.lower(),
        netloc,
        parsed.path or "/",
        parsed.query,
        parsed.fragment,
    ))


class VideoURLMatcher:
    """Matches URLs against the YouTube, Vimeo and Dailymotion URL schemes."""

    # /123, /video/123, /channels/staff/123, /groups/name/videos/123
    VIMEO_PATH_PATTERN = re.compile(
        r"^(?:/video|/channels/[\w-]+|/groups/[\w-]+/videos)?/(\d+)", re.ASCII
    )

    @classmethod
    def match(cls, url: str) -> Optional[Tuple[str, Provider]]:
        """
        Detect the provider and video id of ``url``.

        Providers are tried in the order YouTube, Vimeo, Dailymotion; the
        first one that yields a non-empty id wins.

        Parameters
        ----------
        url : str
            The URL to inspect.

        Returns
        -------
        Optional[Tuple[str, Provider]]
            ``(video_id, provider)``, or None if no provider matches.

        Raises
        ------
        MalformedUrlError
            If ``url`` cannot be parsed.
        """
        return cls.match_parsed(parse_url(url))

    @classmethod
    def match_parsed(cls, parsed: SplitResult) -> Optional[Tuple[str, Provider]]:
        """Same as :meth:`match` for an already parsed URL."""
        host = parsed.hostname or ""

        detectors = (
            (Provider.YOUTUBE, cls._detect_youtube),
            (Provider.VIMEO, cls._detect_vimeo),
            (Provider.DAILYMOTION, cls._detect_dailymotion),
        )
        for provider, detect in detectors:
            video_id = detect(host, parsed)
            if video_id:
                logger.debug("Matched %s video %s in %s", provider.value, video_id, parsed.geturl())
                return video_id, provider

        return None

    @staticmethod
    def _detect_youtube(host: str, parsed: SplitResult) -> Optional[str]:
        if "youtube.com" in host:
            return parse_qs(parsed.query).get("v", [None])[0]

        if host == "youtu.be":
            return _path_segment(parsed.path, 1)

        return None

    @classmethod
    def _detect_vimeo(cls, host: str, parsed: SplitResult) -> Optional[str]:
        if host != "vimeo.com":
            return None

        match = cls.VIMEO_PATH_PATTERN.match(parsed.path)
        return match.group(1) if match else None

    @staticmethod
    def _detect_dailymotion(host: str, parsed: SplitResult) -> Optional[str]:
        if "dailymotion.com" in host:
            # /video/x2p4qyf_some-title -> x2p4qyf
            segment = _path_segment(parsed.path, 2)
            return segment.split("_")[0] if segment else None

        if host == "dai.ly":
            return _path_segment(parsed.path, 1)

        return None


def _path_segment(path: str, index: int) -> Optional[str]:
    segments = path.split("/")
    if index < len(segments):
        return segments[index] or None
    return None


def match_video_url(url: str) -> Optional[Tuple[str, Provider]]:
    """Detect provider and video id. Convenience wrapper around VideoURLMatcher."""
    return VideoURLMatcher.match(url)
