"""``linkroute match``: resolve a URL against a RouteTable.

Prints the resolved target and every parameter the destination would
receive. Exits with code 1 when nothing is registered for the URL.
"""

import argparse
import sys

from linkroute.cli._table import describe_target, load_table
from linkroute.errors import LinkRouteError


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` and print the target and its parameters.

    Looks up the callback slot with ``--callback``, the type slot
    otherwise.
    """
    try:
        table = load_table(args.table)
    except LinkRouteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.callback:
        resolution = table.resolve_callback(args.url)
        slot = "callback"
    else:
        resolution = table.resolve_type(args.url)
        slot = "type"

    if resolution.target is None:
        if resolution.matched:
            print(f"No {slot} registered for {args.url!r}", file=sys.stderr)
        else:
            print(f"No route matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"{slot}: {describe_target(resolution.target)}")
    width = max(len(key) for key in resolution.parameters)
    for key, value in resolution.parameters.items():
        print(f"  {key:<{width}}  {value}")
