"""Block commands."""

from __future__ import annotations

from ..core import ConfigError, get_client, pagination_query, parse_json_arg, print_result


def cmd_blocks_get(args):
    client = get_client(args)
    print_result(client.get(f"/v1/blocks/{args.id}"), args.output)


def cmd_blocks_children(args):
    client = get_client(args)
    print_result(client.get(f"/v1/blocks/{args.id}/children", pagination_query(args)), args.output)


def cmd_blocks_append(args):
    body = {"children": parse_json_arg(args.children, "children")}
    if args.after:
        body["after"] = args.after

    client = get_client(args)
    print_result(client.patch(f"/v1/blocks/{args.id}/children", body), args.output)


def cmd_blocks_update(args):
    body = parse_json_arg(args.data, "block data")
    if args.archived is not None:
        if not isinstance(body, dict):
            raise ConfigError("Block data must be a JSON object to set --archived")
        body["archived"] = args.archived

    client = get_client(args)
    print_result(client.patch(f"/v1/blocks/{args.id}", body), args.output)


def cmd_blocks_delete(args):
    client = get_client(args)
    print_result(client.delete(f"/v1/blocks/{args.id}"), args.output)
