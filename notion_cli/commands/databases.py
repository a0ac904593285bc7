"""Database and data source commands."""

from __future__ import annotations

from ..core import add_pagination, get_client, parse_json_arg, print_result


def cmd_db_get(args):
    client = get_client(args)
    print_result(client.get(f"/v1/databases/{args.id}"), args.output)


def cmd_ds_get(args):
    client = get_client(args)
    print_result(client.get(f"/v1/data_sources/{args.id}"), args.output)


def cmd_ds_create(args):
    body = {
        "parent": {"page_id": args.parent},
        "title": [{"type": "text", "text": {"content": args.title}}],
    }
    if args.properties is not None:
        body["properties"] = parse_json_arg(args.properties, "properties")

    client = get_client(args)
    print_result(client.post("/v1/data_sources", body), args.output)


def cmd_ds_update(args):
    body = parse_json_arg(args.data, "data source")
    client = get_client(args)
    print_result(client.patch(f"/v1/data_sources/{args.id}", body), args.output)


def cmd_ds_query(args):
    body = {}
    if args.filter is not None:
        body["filter"] = parse_json_arg(args.filter, "filter")
    if args.sorts is not None:
        body["sorts"] = parse_json_arg(args.sorts, "sorts")
    add_pagination(body, args)

    client = get_client(args)
    print_result(client.post(f"/v1/data_sources/{args.id}/query", body), args.output)


def cmd_ds_templates(args):
    client = get_client(args)
    print_result(client.get(f"/v1/data_sources/{args.id}/templates"), args.output)
