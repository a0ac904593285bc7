"""Page commands."""

from __future__ import annotations

from ..core import ConfigError, get_client, pagination_query, parse_json_arg, print_result


def _move_parent(parent_type: str, parent_id: str | None) -> dict:
    if parent_type == "page":
        return {"type": "page_id", "page_id": parent_id}
    if parent_type == "database":
        return {"type": "database_id", "database_id": parent_id}
    if parent_type == "workspace":
        return {"type": "workspace"}
    raise ConfigError(
        f"Invalid parent type: {parent_type}. Use 'page', 'database', or 'workspace'"
    )


def cmd_pages_get(args):
    client = get_client(args)
    query = [("filter_properties", p) for p in args.filter_properties or []]
    print_result(client.get(f"/v1/pages/{args.id}", query), args.output)


def cmd_pages_create(args):
    properties = parse_json_arg(args.properties, "properties")
    if args.database_parent:
        parent = {"database_id": args.parent}
    else:
        parent = {"page_id": args.parent}
    body = {"parent": parent, "properties": properties}
    if args.children is not None:
        body["children"] = parse_json_arg(args.children, "children")

    client = get_client(args)
    print_result(client.post("/v1/pages", body), args.output)


def cmd_pages_update(args):
    body = {"properties": parse_json_arg(args.properties, "properties")}
    if args.archived is not None:
        body["archived"] = args.archived

    client = get_client(args)
    print_result(client.patch(f"/v1/pages/{args.id}", body), args.output)


def cmd_pages_move(args):
    if args.parent_type != "workspace" and not args.to:
        raise ConfigError("--to is required unless --parent-type is workspace")
    body = {"parent": _move_parent(args.parent_type, args.to)}

    client = get_client(args)
    print_result(client.post(f"/v1/pages/{args.id}/move", body), args.output)


def cmd_pages_property(args):
    client = get_client(args)
    path = f"/v1/pages/{args.page_id}/properties/{args.property_id}"
    print_result(client.get(path, pagination_query(args)), args.output)
