"""Implementation of the ``notion search`` command."""

from __future__ import annotations

from ..core import add_pagination, get_client, print_result


def cmd_search(args):
    client = get_client(args)
    body = {"query": args.query}
    if args.filter:
        body["filter"] = {"value": args.filter, "property": "object"}
    add_pagination(body, args)
    print_result(client.post("/v1/search", body), args.output)
