"""Schema definitions for detected videos, render options and thumbnails."""

from enum import Enum
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..exceptions import InvalidUsageError


class Provider(str, Enum):
    """Video hosting services this package knows how to embed."""

    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    DAILYMOTION = "dailymotion"


class VideoReference(BaseModel):
    """A video detected in a URL."""

    model_config = ConfigDict(frozen=True)

    id: str
    source: Provider
    url: str
    embed_url: str

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        """A reference is only ever built for a non-empty id."""
        if not v:
            raise ValueError("Video id must not be empty")
        return v


def _validate(model, options):
    try:
        return model.model_validate(options)
    except ValidationError as exc:
        raise InvalidUsageError(f"Invalid {model.__name__}: {exc}") from exc


class EmbedOptions(BaseModel):
    """Query parameters and extra HTML attributes for a rendered iframe."""

    model_config = ConfigDict(frozen=True)

    query: Optional[Dict[Any, Any]] = None
    attr: Optional[Dict[Any, Any]] = None

    @classmethod
    def coerce(cls, options: Union["EmbedOptions", Dict[str, Any], None]) -> "EmbedOptions":
        """Accept an ``EmbedOptions``, a plain mapping or ``None``."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return _validate(cls, options)


class ImageOptions(BaseModel):
    """Requested thumbnail variant."""

    model_config = ConfigDict(frozen=True)

    # Not restricted to str: resolve() swaps unknown values for the default.
    image: Optional[Any] = None

    @classmethod
    def coerce(cls, options: Union["ImageOptions", Dict[str, Any], None]) -> "ImageOptions":
        """Accept an ``ImageOptions``, a plain mapping or ``None``."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return _validate(cls, options)

    def resolve(self, allowed: Sequence[str], default: str) -> "ImageOptions":
        """
        Return a new ``ImageOptions`` whose variant is guaranteed to be allowed.

        Parameters
        ----------
        allowed : Sequence[str]
            Variant names the provider understands.
        default : str
            Variant used when the requested one is missing or unknown.

        Returns
        -------
        ImageOptions
            A fresh record; ``self`` is left untouched.
        """
        image = self.image if self.image in allowed else default
        return ImageOptions(image=image)


class ImageResult(BaseModel):
    """A resolved thumbnail."""

    model_config = ConfigDict(frozen=True)

    src: str
    html: str
