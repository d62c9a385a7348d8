"""Serialization of iframe query parameters and HTML attributes."""

from typing import Any, Dict, Mapping, Tuple, Union
from urllib.parse import quote

from markupsafe import escape

from ..schemas.video_schema import EmbedOptions

# Characters encodeURIComponent leaves alone on top of quote()'s defaults.
_QUERY_SAFE = "!*'()"


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_query(query: Mapping[str, Any]) -> str:
    """
    Serialize a mapping into ``key=value`` pairs joined with ``&``.

    Parameters
    ----------
    query : Mapping[str, Any]
        Query parameters. Keys and values are percent-encoded.

    Returns
    -------
    str
        The query string, without a leading ``?``.
    """
    return "&".join(
        f"{quote(_stringify(key), safe=_QUERY_SAFE)}={quote(_stringify(value), safe=_QUERY_SAFE)}"
        for key, value in query.items()
    )


def serialize_attributes(attributes: Mapping[str, Any]) -> str:
    """
    Serialize a mapping into space separated ``key="value"`` HTML attributes.

    Values are HTML-escaped so they cannot break out of the attribute.
    """
    return " ".join(
        f'{key}="{escape(_stringify(value))}"' for key, value in attributes.items()
    )


def parse_options(
    options: Union[EmbedOptions, Dict[str, Any], None],
) -> Tuple[str, str]:
    """
    Turn embed options into the fragments inserted into an iframe tag.

    Parameters
    ----------
    options : Union[EmbedOptions, Dict[str, Any], None]
        ``{"query": {...}, "attr": {...}}`` or an ``EmbedOptions``.

    Returns
    -------
    Tuple[str, str]
        ``(query_suffix, attribute_suffix)``. The query suffix is empty or starts
        with ``?``; the attribute suffix is empty or starts with a space.
    """
    opts = EmbedOptions.coerce(options)

    query_string = f"?{serialize_query(opts.query)}" if opts.query else ""
    attributes = f" {serialize_attributes(opts.attr)}" if opts.attr else ""

    return query_string, attributes


def image_tag(src: str) -> str:
    """Render the ``<img>`` tag for a thumbnail URL."""
    return f'<img src="{escape(src)}"/>'
