"""User commands."""

from __future__ import annotations

from ..core import get_client, pagination_query, print_result


def cmd_users_me(args):
    client = get_client(args)
    print_result(client.get("/v1/users/me"), args.output)


def cmd_users_get(args):
    client = get_client(args)
    print_result(client.get(f"/v1/users/{args.id}"), args.output)


def cmd_users_list(args):
    client = get_client(args)
    print_result(client.get("/v1/users", pagination_query(args)), args.output)
