"""URL parsing into route paths.

Splits an incoming URL string into the pieces the trie and the parameter
merge need: path segments, ordered query items, and the fragment.
"""

import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlsplit

from linkroute.routing.route import PathSegment

# An escaped separator stays escaped so a segment never contains "/"
_ENCODED_SLASH = re.compile(r"%2f", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class RoutePath:
    """A parsed URL.

    ``query`` keeps every item in order, duplicates included. An item
    written without ``=`` has a ``None`` value. ``fragment`` is ``None``
    when the URL has no ``#`` at all.
    """

    segments: tuple[str, ...]
    query: tuple[tuple[str, str | None], ...] = ()
    fragment: str | None = None
    original: Any = None

    @property
    def source(self) -> Any:
        """The value the caller passed in, or this path if built directly."""
        return self if self.original is None else self.original


def parse_segment(text: str, placeholder_prefix: str = ":") -> PathSegment:
    """Parse one pattern segment.

    Examples::

        "user" -> PathSegment("user")
        ":id"  -> PathSegment(":id", is_placeholder=True, name="id")
        ":"    -> PathSegment(":")   (no name, so literal)
    """
    if text.startswith(placeholder_prefix) and len(text) > len(placeholder_prefix):
        return PathSegment(
            value=text,
            is_placeholder=True,
            name=text[len(placeholder_prefix) :],
        )
    return PathSegment(value=text)


def _decode_segment(part: str) -> str:
    return "%2F".join(unquote(piece) for piece in _ENCODED_SLASH.split(part))


def split_segments(path: str) -> tuple[str, ...]:
    """Split a URL path component into non-empty decoded segments.

    ``%2F`` is left encoded (normalized to upper case): ``/a%2Fb`` is the
    single segment ``a%2Fb``.
    """
    return tuple(_decode_segment(part) for part in path.split("/") if part)


def parse_query(query: str) -> tuple[tuple[str, str | None], ...]:
    """Parse a raw query string into ordered ``(name, value)`` items.

    ``+`` is kept as-is; only percent escapes are decoded.
    """
    items: list[tuple[str, str | None]] = []
    for piece in query.split("&"):
        if not piece:
            continue
        if "=" in piece:
            name, value = piece.split("=", 1)
            items.append((unquote(name), unquote(value)))
        else:
            items.append((unquote(piece), None))
    return tuple(items)


def parse_url(url: str | RoutePath) -> RoutePath:
    """Parse *url* into a ``RoutePath``.

    Accepts an already-parsed ``RoutePath`` (returned unchanged), an
    absolute URL (``app://host/user/42?tab=posts#top``), or a bare path
    (``/user/42``). Only the path component contributes segments; scheme
    and host are ignored.

    Raises ``TypeError`` for any other input type.
    """
    if isinstance(url, RoutePath):
        return url
    if not isinstance(url, str):
        msg = f"Expected a URL string or RoutePath, got {type(url).__name__}"
        raise TypeError(msg)

    parts = urlsplit(url)
    fragment = unquote(parts.fragment) if "#" in url else None
    return RoutePath(
        segments=split_segments(parts.path),
        query=parse_query(parts.query),
        fragment=fragment,
        original=url,
    )
