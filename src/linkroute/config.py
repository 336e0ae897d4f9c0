"""Route table configuration.

RouteConfig is a frozen dataclass: immutable after creation, validated
once at construction.
"""

from dataclasses import dataclass

from linkroute.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Route table configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouteConfig(placeholder_prefix="$", url_key="url")
    """

    # Pattern segments starting with this prefix bind a parameter (":id")
    placeholder_prefix: str = ":"

    # Reserved parameter keys
    url_key: str = "route_url"
    fragment_key: str = "fragment"

    def __post_init__(self) -> None:
        if not self.placeholder_prefix:
            msg = "placeholder_prefix must not be empty."
            raise ConfigurationError(msg)
        if "/" in self.placeholder_prefix:
            msg = f"placeholder_prefix {self.placeholder_prefix!r} must not contain '/'."
            raise ConfigurationError(msg)
        if not self.url_key or not self.fragment_key:
            msg = "url_key and fragment_key must not be empty."
            raise ConfigurationError(msg)
        if self.url_key == self.fragment_key:
            msg = f"url_key and fragment_key must differ (both {self.url_key!r})."
            raise ConfigurationError(msg)
