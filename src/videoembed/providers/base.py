"""Shared behaviour of the per-provider renderers and thumbnail resolvers."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Coroutine, Dict, Optional, Tuple, Union
from urllib.parse import quote

import requests

from ..exceptions import InvalidUsageError, UpstreamError
from ..schemas.video_schema import EmbedOptions, ImageOptions, ImageResult, Provider
from ..utils import http_client
from ..utils.options import image_tag, parse_options

logger = logging.getLogger(__name__)

ImageCallback = Callable[..., None]
OptionsArg = Union[EmbedOptions, Dict[str, Any], None]
ImageOptionsArg = Union[ImageOptions, Dict[str, Any], None]


def running_loop() -> asyncio.AbstractEventLoop:
    """Return the running event loop, or fail if callback-style calls have nowhere to run."""
    try:
        return asyncio.get_running_loop()
    except RuntimeError as exc:
        raise InvalidUsageError(
            "callback-style image lookups must be made from a running event loop; "
            "await fetch_image() or image_async() instead"
        ) from exc


def schedule(coro_factory: Callable[[], Coroutine[Any, Any, ImageResult]],
             callback: ImageCallback) -> "asyncio.Task[ImageResult]":
    """
    Run a thumbnail lookup as a task and report its outcome to ``callback``.

    The callback receives ``(None, result)`` on success and ``(error,)`` on
    failure. It always runs on a later turn of the loop, never inline.
    """
    loop = running_loop()
    task = loop.create_task(coro_factory())

    def _report(done: "asyncio.Task[ImageResult]") -> None:
        if done.cancelled():
            callback(asyncio.CancelledError())
            return
        error = done.exception()
        if error is not None:
            callback(error)
        else:
            callback(None, done.result())

    task.add_done_callback(_report)
    return task


class VideoProvider(ABC):
    """
    Renderer and thumbnail resolver for one video hosting service.

    Instances are callable: ``provider(video_id, options)`` renders the iframe.
    """

    source: Provider
    embed_template: str
    iframe_flags: str = "allowfullscreen"
    image_variants: Tuple[str, ...] = ()
    default_image: str = ""

    @property
    def name(self) -> str:
        return self.source.value

    def embed_url(self, video_id: str) -> str:
        """Return the protocol-relative iframe ``src`` for ``video_id``."""
        return self.embed_template.format(id=quote(str(video_id), safe=""))

    def render(self, video_id: str, options: OptionsArg = None) -> str:
        """
        Render an ``<iframe>`` embedding ``video_id``.

        Parameters
        ----------
        video_id : str
            The provider's video id.
        options : OptionsArg
            ``{"query": {...}, "attr": {...}}``; query entries are appended to the
            iframe ``src`` and attributes are added to the tag.

        Returns
        -------
        str
            The iframe HTML.
        """
        query, attributes = parse_options(options)
        return (
            f'<iframe src="{self.embed_url(video_id)}{query}"{attributes} '
            f'frameborder="0" {self.iframe_flags}></iframe>'
        )

    __call__ = render

    def image_options(self, options: ImageOptionsArg) -> ImageOptions:
        """Validate the requested variant, falling back to the provider default."""
        return ImageOptions.coerce(options).resolve(self.image_variants, self.default_image)

    def build_image_result(self, src: str) -> ImageResult:
        return ImageResult(src=src, html=image_tag(src))

    @abstractmethod
    async def fetch_image(self, video_id: str, options: ImageOptionsArg = None) -> ImageResult:
        """Resolve the thumbnail for ``video_id``."""

    def image(
        self,
        video_id: str,
        options: ImageOptionsArg = None,
        callback: Optional[ImageCallback] = None,
    ) -> Any:
        """
        Callback-style thumbnail lookup.

        Raises
        ------
        InvalidUsageError
            If no callback is given, or no event loop is running.

        Returns
        -------
        asyncio.Task
            The scheduled lookup. Errors reach ``callback``, never the caller.
        """
        if callback is None:
            raise InvalidUsageError(f"must pass {self.name}.image a callback")
        return schedule(lambda: self.fetch_image(video_id, options), callback)

    async def _get_json(self, url: str) -> Any:
        """GET ``url`` off the event loop and decode its JSON body."""
        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, http_client.get, url)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise UpstreamError(f"request to {self.name} failed: {exc}") from exc

        if response.status_code != 200:
            logger.warning("%s answered %s for %s", self.name, response.status_code, url)
            raise UpstreamError(
                f"unexpected response from {self.name}", status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"invalid JSON from {self.name}", status_code=response.status_code
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
