"""Router package initialization."""

from .embeds import router as embeds
from .index import router as index

__all__ = ["embeds", "index"]
