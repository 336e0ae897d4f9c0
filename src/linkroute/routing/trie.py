"""Segment trie with literal and placeholder edges.

Two traversals share one tree:

- the *pattern* walk (``find_pattern_node``) follows the edges a pattern
  was registered with. Any placeholder token (``:id``, ``:uid``) reaches
  the single placeholder child, a concrete value (``42``) never does;
- the *value* walk (``search_nearest``) resolves a concrete path, trying
  the literal child first and falling back to the placeholder child,
  binding its name to the concrete segment.

The value walk is greedy. Once it takes an edge it never revisits the
choice, so ``/a/b/d`` does not match ``/a/:x/d`` when ``/a/b`` exists.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from linkroute.routing.path import parse_segment

logger = logging.getLogger("linkroute.routing")


class TrieNode:
    """A node in the segment trie.

    ``key`` is the segment text of the edge from ``parent`` to this node:
    the literal (``user``) or the placeholder token (``:id``).
    """

    __slots__ = ("children", "is_placeholder", "key", "parent", "placeholder", "value")

    def __init__(
        self,
        parent: "TrieNode | None" = None,
        key: str = "",
        *,
        is_placeholder: bool = False,
    ) -> None:
        self.parent = parent
        self.key = key
        self.is_placeholder = is_placeholder
        # Literal segment children: "user" -> node
        self.children: dict[str, TrieNode] = {}
        # Single placeholder child (only one placeholder per level)
        self.placeholder: _PlaceholderEdge | None = None
        self.value: Any = None

    @property
    def is_prunable(self) -> bool:
        return self.value is None and not self.children and self.placeholder is None

    @property
    def pattern(self) -> str:
        """The pattern text leading to this node, e.g. ``/user/:id``."""
        parts: list[str] = []
        node = self
        while node.parent is not None:
            parts.append(node.key)
            node = node.parent
        return "/" + "/".join(reversed(parts))

    def __repr__(self) -> str:
        return f"TrieNode({self.pattern!r}, value={self.value!r})"


@dataclass(slots=True)
class _PlaceholderEdge:
    """A placeholder edge in the trie. Renamed in place on re-registration."""

    name: str
    node: TrieNode


@dataclass(frozen=True, slots=True)
class TrieMatch:
    """Result of a successful value walk."""

    node: TrieNode
    value: Any
    bindings: dict[str, str]


class SegmentTrie:
    """Prefix tree keyed by path segments.

    Usage::

        trie = SegmentTrie()
        trie.insert(["user", ":id"], "profile")
        match = trie.search_nearest(["user", "42"])
        match.value     # "profile"
        match.bindings  # {"id": "42"}
    """

    __slots__ = ("_placeholder_prefix", "_root")

    def __init__(self, placeholder_prefix: str = ":") -> None:
        self._root = TrieNode()
        self._placeholder_prefix = placeholder_prefix

    @property
    def root(self) -> TrieNode:
        return self._root

    def is_empty(self) -> bool:
        return self._root.is_prunable

    def insert(self, segments: Sequence[str], value: Any) -> bool:
        """Store *value* at the node for *segments*, creating nodes as needed.

        Replaces any value already there. Returns ``False`` if *segments*
        is empty.
        """
        if not segments:
            return False

        node = self._root
        for text in segments:
            seg = parse_segment(text, self._placeholder_prefix)
            if seg.is_placeholder:
                edge = node.placeholder
                if edge is None:
                    edge = _PlaceholderEdge(
                        seg.name, TrieNode(parent=node, key=seg.value, is_placeholder=True)
                    )
                    node.placeholder = edge
                elif edge.name != seg.name:
                    logger.warning(
                        "Placeholder %r under %r renamed to %r",
                        edge.node.key,
                        node.pattern,
                        seg.value,
                    )
                    edge.name = seg.name
                    edge.node.key = seg.value
                node = edge.node
            else:
                child = node.children.get(seg.value)
                if child is None:
                    child = TrieNode(parent=node, key=seg.value)
                    node.children[seg.value] = child
                node = child

        node.value = value
        return True

    def find_pattern_node(self, segments: Sequence[str]) -> TrieNode | None:
        """Return the node that represents the pattern *segments*, if it exists.

        A node has at most one placeholder child, so any placeholder token
        reaches it whatever its name. Concrete values never match a
        placeholder here.
        """
        return self._walk_pattern(segments)

    def search_nearest(self, segments: Sequence[str]) -> TrieMatch | None:
        """Resolve concrete *segments* to the nearest registered value."""
        return self._walk_value(segments)

    def matched_pattern(self, segments: Sequence[str]) -> dict[str, str]:
        """Return the placeholder bindings for *segments*, or ``{}``."""
        match = self._walk_value(segments)
        if match is None:
            return {}
        return dict(match.bindings)

    def remove(self, node: TrieNode) -> None:
        """Clear *node*'s value and prune empty, childless ancestors."""
        node.value = None
        while node.parent is not None and node.is_prunable:
            parent = node.parent
            if node.is_placeholder:
                parent.placeholder = None
            else:
                del parent.children[node.key]
            node.parent = None
            node = parent

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(pattern, value)`` for every node that holds a value."""
        yield from self._collect(self._root)

    def _collect(self, node: TrieNode) -> Iterator[tuple[str, Any]]:
        if node.value is not None:
            yield node.pattern, node.value
        for child in node.children.values():
            yield from self._collect(child)
        if node.placeholder is not None:
            yield from self._collect(node.placeholder.node)

    def _walk_pattern(self, segments: Sequence[str]) -> TrieNode | None:
        if not segments:
            return None

        node = self._root
        for text in segments:
            seg = parse_segment(text, self._placeholder_prefix)
            if seg.is_placeholder:
                if node.placeholder is None:
                    return None
                node = node.placeholder.node
            else:
                child = node.children.get(seg.value)
                if child is None:
                    return None
                node = child
        return node

    def _walk_value(self, segments: Sequence[str]) -> TrieMatch | None:
        node = self._root
        bindings: dict[str, str] = {}

        for part in segments:
            # 1. Literal child (exact match)
            child = node.children.get(part)
            if child is None:
                # 2. Placeholder child, no backtracking past this point
                edge = node.placeholder
                if edge is None:
                    return None
                bindings[edge.name] = part
                child = edge.node
            node = child

        if node.value is None:
            return None
        return TrieMatch(node=node, value=node.value, bindings=bindings)
