"""FastAPI application exposing video detection, embeds and thumbnails as JSON."""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from videoembed import VideoEmbedError, __version__

from .routers import embeds, index
from .server_utils import (
    lifespan,
    limiter,
    rate_limit_exception_handler,
    video_embed_exception_handler,
)

app = FastAPI(title="videoembed preview", version=__version__, lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
app.add_exception_handler(VideoEmbedError, video_embed_exception_handler)

app.include_router(index)
app.include_router(embeds)
