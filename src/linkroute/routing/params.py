"""Resolved parameter merging.

Builds the parameter mapping handed to a destination from the placeholder
bindings, the URL itself, its query items, and its fragment.
"""

from collections.abc import Mapping
from typing import Any

from linkroute.config import RouteConfig
from linkroute.routing.path import RoutePath


def extract_parameters(
    path: RoutePath,
    bindings: Mapping[str, str],
    config: RouteConfig | None = None,
) -> dict[str, Any]:
    """Merge *bindings*, the URL, query items and fragment into one dict.

    Written in this order, later writes winning on a key clash:

    1. placeholder bindings
    2. ``config.url_key`` -> the original URL value
    3. each query item with a value, left to right
    4. ``config.fragment_key`` -> fragment, when the URL has one

    Query items written without ``=`` carry no value and are skipped.
    """
    cfg = config or RouteConfig()
    params: dict[str, Any] = dict(bindings)
    params[cfg.url_key] = path.source
    for name, value in path.query:
        if value is not None:
            params[name] = value
    if path.fragment is not None:
        params[cfg.fragment_key] = path.fragment
    return params
