"""Route table: two registration slots per pattern on one segment trie.

Each trie node stores a ``RouteSlots`` pair. The type slot and the
callback slot are registered and unregistered independently; writing one
always preserves the other.

Thread safety:
    - Every public call holds ``_lock`` for its whole duration, so a
      type registration and a callback registration at the same pattern
      never interleave their read-modify-write of the pair.
    - ``RouteSlots`` is frozen; a node's pair is replaced, never mutated.
"""

import logging
import threading

from linkroute.config import RouteConfig
from linkroute.routing.params import extract_parameters
from linkroute.routing.path import RoutePath, parse_url
from linkroute.routing.route import Resolution, RouteEntry, RouteSlots
from linkroute.routing.trie import SegmentTrie

logger = logging.getLogger("linkroute.routing")


class RouteTable:
    """Registered URL patterns and their destinations.

    Usage::

        table = RouteTable()
        table.register_type("/user/:id", ProfileScreen)
        table.register_callback("/user/:id", open_profile)

        params, screen = table.resolve_type("app://host/user/42?tab=posts")
        # params == {"id": "42", "route_url": "app://...", "tab": "posts"}
        # screen is ProfileScreen

    Create one table at startup and pass it to whatever registers or
    resolves links.
    """

    __slots__ = ("_config", "_lock", "_trie")

    def __init__(self, config: RouteConfig | None = None) -> None:
        self._config = config or RouteConfig()
        self._lock = threading.Lock()
        self._trie = SegmentTrie(self._config.placeholder_prefix)

    @property
    def config(self) -> RouteConfig:
        return self._config

    # -- Registration --

    def register_type(self, url: str | RoutePath, type_handle: object) -> bool:
        """Register *type_handle* for the pattern *url*.

        Keeps any callback already registered at the same pattern.
        Returns ``False`` if the pattern has no path segments.
        """
        if type_handle is None:
            msg = "type_handle must not be None; use unregister_type() to clear it."
            raise TypeError(msg)

        path = parse_url(url)
        with self._lock:
            current = self._current_slots(path)
            ok = self._trie.insert(
                path.segments, RouteSlots(type_handle=type_handle, callback=current.callback)
            )
        logger.debug("Registered type %r for %r (ok=%s)", type_handle, url, ok)
        return ok

    def register_callback(self, url: str | RoutePath, callback: object) -> bool:
        """Register *callback* for the pattern *url*.

        Keeps any type already registered at the same pattern.
        Returns ``False`` if the pattern has no path segments.
        """
        if callback is None:
            msg = "callback must not be None; use unregister_callback() to clear it."
            raise TypeError(msg)

        path = parse_url(url)
        with self._lock:
            current = self._current_slots(path)
            ok = self._trie.insert(
                path.segments, RouteSlots(type_handle=current.type_handle, callback=callback)
            )
        logger.debug("Registered callback %r for %r (ok=%s)", callback, url, ok)
        return ok

    def unregister_type(self, url: str | RoutePath) -> None:
        """Clear the type slot of the pattern *url*. No-op if not registered."""
        path = parse_url(url)
        with self._lock:
            node = self._trie.find_pattern_node(path.segments)
            if node is None or node.value is None:
                return
            slots: RouteSlots = node.value
            if slots.callback is None:
                self._trie.remove(node)
            else:
                node.value = RouteSlots(callback=slots.callback)
        logger.debug("Unregistered type for %r", url)

    def unregister_callback(self, url: str | RoutePath) -> None:
        """Clear the callback slot of the pattern *url*. No-op if not registered."""
        path = parse_url(url)
        with self._lock:
            node = self._trie.find_pattern_node(path.segments)
            if node is None or node.value is None:
                return
            slots: RouteSlots = node.value
            if slots.type_handle is None:
                self._trie.remove(node)
            else:
                node.value = RouteSlots(type_handle=slots.type_handle)
        logger.debug("Unregistered callback for %r", url)

    def _current_slots(self, path: RoutePath) -> RouteSlots:
        node = self._trie.find_pattern_node(path.segments)
        if node is None or node.value is None:
            return RouteSlots()
        return node.value

    def clear(self) -> None:
        """Drop every registration."""
        with self._lock:
            self._trie = SegmentTrie(self._config.placeholder_prefix)

    # -- Resolution --

    def resolve_type(self, url: str | RoutePath) -> Resolution:
        """Resolve a concrete *url* to its registered type.

        Parameters are always returned, even when nothing matched.
        """
        return self._resolve(url, callback=False)

    def resolve_callback(self, url: str | RoutePath) -> Resolution:
        """Resolve a concrete *url* to its registered callback.

        Parameters are always returned, even when nothing matched.
        """
        return self._resolve(url, callback=True)

    def _resolve(self, url: str | RoutePath, *, callback: bool) -> Resolution:
        path = parse_url(url)
        with self._lock:
            match = self._trie.search_nearest(path.segments)

        if match is None:
            return Resolution(parameters=extract_parameters(path, {}, self._config))

        slots: RouteSlots = match.value
        return Resolution(
            parameters=extract_parameters(path, match.bindings, self._config),
            target=slots.callback if callback else slots.type_handle,
            matched=True,
        )

    # -- Introspection --

    def lookup(self, pattern: str | RoutePath) -> RouteEntry | None:
        """Return the registration stored for *pattern* itself, if any.

        Matches the pattern structurally: ``lookup("/user/:id")`` finds the
        ``/user/:id`` registration, ``lookup("/user/42")`` does not.
        """
        path = parse_url(pattern)
        with self._lock:
            node = self._trie.find_pattern_node(path.segments)
            if node is None or node.value is None:
                return None
            return RouteEntry(node.pattern, node.value.type_handle, node.value.callback)

    @property
    def routes(self) -> list[RouteEntry]:
        """Return a snapshot of every registered pattern."""
        with self._lock:
            return [
                RouteEntry(pattern, slots.type_handle, slots.callback)
                for pattern, slots in self._trie.items()
            ]

    def is_empty(self) -> bool:
        """True when no pattern is registered and no node is left behind."""
        with self._lock:
            return self._trie.is_empty()

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for _ in self._trie.items())
