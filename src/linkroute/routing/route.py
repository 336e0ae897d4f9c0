"""PathSegment, RouteSlots, RouteEntry and Resolution frozen dataclasses."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:      ``user``  (is_placeholder=False)
    Placeholder:  ``:id``   (is_placeholder=True, name="id")

    ``name`` is empty for literals.
    """

    value: str
    is_placeholder: bool = False
    name: str = ""


@dataclass(frozen=True, slots=True)
class RouteSlots:
    """The two independent registrations stored at one trie node.

    ``type_handle`` holds a type registration, ``callback`` a callback
    registration. A node never stores a ``RouteSlots`` with both empty.
    """

    type_handle: Any = None
    callback: Any = None

    @property
    def is_empty(self) -> bool:
        return self.type_handle is None and self.callback is None


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """Snapshot of one registered pattern, for introspection."""

    pattern: str
    type_handle: Any = None
    callback: Any = None


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving a concrete URL against the table.

    ``target`` is ``None`` both when nothing matched and when the matched
    node has no registration in the requested slot; ``matched`` tells the
    two apart. Unpacks as ``parameters, target``.
    """

    parameters: dict[str, Any]
    target: Any = None
    matched: bool = False

    def __iter__(self) -> Iterator[Any]:
        yield self.parameters
        yield self.target
