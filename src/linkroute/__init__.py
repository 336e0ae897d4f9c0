"""linkroute: deep-link routing for registered URL patterns.

Register URL patterns once, then resolve incoming links to a registered
type or callback plus the parameters carried by the link.

Basic usage::

    from linkroute import RouteTable

    table = RouteTable()
    table.register_type("/user/:id", ProfileScreen)

    params, screen = table.resolve_type("app://host/user/42#bio")
    # params["id"] == "42", params["fragment"] == "bio"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "LinkRouteError",
    "Resolution",
    "RouteConfig",
    "RouteEntry",
    "RoutePath",
    "RouteTable",
    "TableLoadError",
    "parse_url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import linkroute`` fast while providing a clean top-level API.
    """
    if name == "RouteTable":
        from linkroute.routing.table import RouteTable

        return RouteTable

    if name == "RouteConfig":
        from linkroute.config import RouteConfig

        return RouteConfig

    if name in ("RoutePath", "parse_url"):
        from linkroute.routing import path as _path

        return getattr(_path, name)

    if name in ("Resolution", "RouteEntry"):
        from linkroute.routing import route as _route

        return getattr(_route, name)

    if name in ("LinkRouteError", "ConfigurationError", "TableLoadError"):
        from linkroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
