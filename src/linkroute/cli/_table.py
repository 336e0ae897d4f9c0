"""Route table loading and display helpers shared by the CLI commands.

A table reference is ``module`` or ``module:attribute``; the attribute
defaults to ``table``. It may name a ``RouteTable`` or a plain mapping of
pattern to type, which is registered into a fresh table.
"""

import importlib
from collections.abc import Mapping

from linkroute.errors import TableLoadError
from linkroute.routing.table import RouteTable

DEFAULT_ATTRIBUTE = "table"


def describe_target(target: object) -> str:
    """Short display name for a registered type or callback (``-`` if empty)."""
    if target is None:
        return "-"
    return getattr(target, "__qualname__", None) or repr(target)


def load_table(reference: str) -> RouteTable:
    """Load the route table named by *reference*.

    Raises ``TableLoadError`` when the reference is malformed, the module
    cannot be imported, the attribute is missing, or it holds something
    other than a ``RouteTable`` or a pattern mapping.
    """
    module_path, sep, attr_name = reference.partition(":")
    if not module_path or (sep and not attr_name) or ":" in attr_name:
        msg = f"Invalid table reference {reference!r}; expected 'module' or 'module:attribute'."
        raise TableLoadError(msg)

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        msg = f"Cannot import {module_path!r}: {exc}"
        raise TableLoadError(msg) from exc

    attr_name = attr_name or DEFAULT_ATTRIBUTE
    obj = getattr(module, attr_name, None)
    if obj is None:
        msg = f"Module {module_path!r} has no route table named {attr_name!r}."
        raise TableLoadError(msg)

    if isinstance(obj, RouteTable):
        return obj
    if isinstance(obj, Mapping):
        return table_from_patterns(obj, reference)

    msg = f"{reference!r} is a {type(obj).__name__}, expected a RouteTable or a pattern mapping."
    raise TableLoadError(msg)


def table_from_patterns(patterns: Mapping[object, object], reference: str) -> RouteTable:
    """Build a table registering each ``pattern -> type`` of *patterns*."""
    table = RouteTable()
    for pattern, type_handle in patterns.items():
        if not isinstance(pattern, str) or type_handle is None:
            msg = f"{reference!r}: entry {pattern!r} -> {type_handle!r} is not a pattern and a type."
            raise TableLoadError(msg)
        if not table.register_type(pattern, type_handle):
            msg = f"{reference!r}: pattern {pattern!r} has no path segments."
            raise TableLoadError(msg)
    return table
