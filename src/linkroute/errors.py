"""linkroute exception hierarchy.

Lookups never raise for "not found"; these cover misconfiguration only.
"""


class LinkRouteError(Exception):
    """Base for all linkroute-specific errors."""


class ConfigurationError(LinkRouteError):
    """Raised when a ``RouteConfig`` is invalid.

    Surfaces at construction time, before any route is registered.
    """


class TableLoadError(LinkRouteError):
    """Raised when the CLI cannot load a route table from a reference.

    Covers malformed ``module:attribute`` strings, import failures, and
    attributes that are neither a table nor a pattern mapping.
    """
