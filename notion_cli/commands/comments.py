"""Comment commands."""

from __future__ import annotations

from ..core import get_client, pagination_query, print_result


def cmd_comments_list(args):
    client = get_client(args)
    query = [("block_id", args.block_id)] + pagination_query(args)
    print_result(client.get("/v1/comments", query), args.output)


def cmd_comments_create(args):
    body = {
        "parent": {"page_id": args.page_id},
        "rich_text": [{"type": "text", "text": {"content": args.text}}],
    }
    client = get_client(args)
    print_result(client.post("/v1/comments", body), args.output)
