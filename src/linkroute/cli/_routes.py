"""``linkroute routes``: list registered patterns.

Loads the RouteTable named by a ``module:attribute`` reference and
prints every registered pattern with its type and callback.
"""

import argparse
import sys

from linkroute.cli._table import describe_target, load_table
from linkroute.errors import LinkRouteError


def run_routes(args: argparse.Namespace) -> None:
    """List registered patterns for a RouteTable.

    Prints a table of PATTERN, TYPE and CALLBACK. An empty slot shows
    as ``-``.
    """
    try:
        table = load_table(args.table)
    except LinkRouteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    entries = table.routes
    if not entries:
        print("No routes registered.")
        return

    rows = [
        (entry.pattern, describe_target(entry.type_handle), describe_target(entry.callback))
        for entry in entries
    ]

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_type = max(max(len(r[1]) for r in rows), 4)  # "TYPE" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_type}}}  {{}}"
    print(fmt.format("PATTERN", "TYPE", "CALLBACK"))
    sep_len = max_pattern + max_type + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, type_name, callback_name in rows:
        print(fmt.format(pattern, type_name, callback_name))
