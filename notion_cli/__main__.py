"""Command line entry point for notion CLI."""

from __future__ import annotations

import argparse
import sys

from notion_cli import __version__
from notion_cli.core import CliError, parse_bool, parse_output_format, print_error
from notion_cli.commands import (
    cmd_init,
    cmd_search,
    cmd_users_me,
    cmd_users_get,
    cmd_users_list,
    cmd_pages_get,
    cmd_pages_create,
    cmd_pages_update,
    cmd_pages_move,
    cmd_pages_property,
    cmd_blocks_get,
    cmd_blocks_children,
    cmd_blocks_append,
    cmd_blocks_update,
    cmd_blocks_delete,
    cmd_comments_list,
    cmd_comments_create,
    cmd_db_get,
    cmd_ds_get,
    cmd_ds_create,
    cmd_ds_update,
    cmd_ds_query,
    cmd_ds_templates,
    cmd_file_uploads_create,
    cmd_file_uploads_send,
    cmd_file_uploads_complete,
    cmd_file_uploads_get,
    cmd_file_uploads_list,
    cmd_file_uploads_upload,
)


def _add_global_flags(parser: argparse.ArgumentParser, *, suppress: bool = False) -> None:
    """Flags accepted both before and after the subcommand.

    Copies attached to subcommands use ``SUPPRESS`` defaults so they only
    overwrite the top-level value when given explicitly.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "--output",
        type=parse_output_format,
        default=default("pretty"),
        metavar="{pretty,json,raw}",
        help="Output format (default: pretty)",
    )
    parser.add_argument(
        "--raw", action="store_true", default=default(False), help="Raw JSON output (same as --output raw)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=default(False),
        help="Show the request without executing it (write operations only)",
    )
    parser.add_argument(
        "--page-size", type=int, default=default(None), help="Number of items per page (max 100)"
    )
    parser.add_argument("--start-cursor", default=default(None), help="Pagination cursor")
    parser.add_argument(
        "--verbose", action="store_true", default=default(False), help="Log HTTP requests to stderr"
    )


def build_parser():
    """Return ``(parser, groups)`` where ``groups`` maps group name to (parser, dest)."""

    parser = argparse.ArgumentParser(
        prog="notion", description="Notion CLI - Interact with the Notion API from the command line"
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_flags(parser)

    common = argparse.ArgumentParser(add_help=False)
    _add_global_flags(common, suppress=True)

    sub = parser.add_subparsers(dest="cmd")
    groups = {}

    def group(name, help_text, **kw):
        p = sub.add_parser(name, help=help_text, **kw)
        dest = f"{name.replace('-', '_')}_cmd"
        groups[name] = (p, dest)
        return p.add_subparsers(dest=dest)

    def leaf(subparsers, name, help_text, func):
        p = subparsers.add_parser(name, help=help_text, parents=[common])
        p.set_defaults(func=func)
        return p

    # init
    leaf(sub, "init", "Initialize configuration and test connection", cmd_init)

    # search
    p = leaf(sub, "search", "Search pages and data sources by title", cmd_search)
    p.add_argument("query", help="Search query")
    p.add_argument("-f", "--filter", choices=["page", "data_source"], help="Filter by object type")

    # user
    sub_user = group("user", "User operations")
    leaf(sub_user, "me", "Get the current bot user", cmd_users_me)
    p = leaf(sub_user, "get", "Get a user by ID", cmd_users_get)
    p.add_argument("id", help="User ID")
    leaf(sub_user, "list", "List all users", cmd_users_list)

    # page
    sub_page = group("page", "Page operations")
    p = leaf(sub_page, "get", "Retrieve a page", cmd_pages_get)
    p.add_argument("id", help="Page ID")
    p.add_argument(
        "--filter-properties",
        action="extend",
        type=lambda s: [v for v in s.split(",") if v],
        default=[],
        help="Filter to specific property IDs (comma-separated or repeated)",
    )

    p = leaf(sub_page, "create", "Create a new page", cmd_pages_create)
    p.add_argument("--parent", required=True, help="Parent page or database ID")
    p.add_argument("--properties", required=True, help="Properties as JSON string")
    p.add_argument("--children", help="Children blocks as JSON string")
    p.add_argument("--database-parent", action="store_true", help="Parent is a database (default: page)")

    p = leaf(sub_page, "update", "Update page properties", cmd_pages_update)
    p.add_argument("id", help="Page ID")
    p.add_argument("--properties", required=True, help="Properties as JSON string")
    p.add_argument("--archived", type=parse_bool, help="Archive/unarchive the page")

    p = leaf(sub_page, "move", "Move a page to a different parent", cmd_pages_move)
    p.add_argument("id", help="Page ID to move")
    p.add_argument(
        "--parent-type",
        default="page",
        choices=["page", "database", "workspace"],
        help="Parent type (default: page)",
    )
    p.add_argument("--to", help="Destination parent ID (not needed for workspace)")

    p = leaf(sub_page, "property", "Get a page property value", cmd_pages_property)
    p.add_argument("page_id", help="Page ID")
    p.add_argument("property_id", help="Property ID")

    # block
    sub_block = group("block", "Block operations")
    p = leaf(sub_block, "get", "Retrieve a block", cmd_blocks_get)
    p.add_argument("id", help="Block ID")
    p = leaf(sub_block, "children", "List block children", cmd_blocks_children)
    p.add_argument("id", help="Block ID")

    p = leaf(sub_block, "append", "Append children to a block", cmd_blocks_append)
    p.add_argument("id", help="Block ID")
    p.add_argument("--children", required=True, help="Children blocks as JSON string")
    p.add_argument("--after", help="Insert after this block ID")

    p = leaf(sub_block, "update", "Update a block", cmd_blocks_update)
    p.add_argument("id", help="Block ID")
    p.add_argument("--data", required=True, help="Block data as JSON string")
    p.add_argument("--archived", type=parse_bool, help="Archive/unarchive the block")

    p = leaf(sub_block, "delete", "Delete a block", cmd_blocks_delete)
    p.add_argument("id", help="Block ID")

    # comment
    sub_comment = group("comment", "Comment operations")
    p = leaf(sub_comment, "list", "List comments on a block or page", cmd_comments_list)
    p.add_argument("--block-id", required=True, help="Block or page ID")
    p = leaf(sub_comment, "create", "Create a comment on a page", cmd_comments_create)
    p.add_argument("--page-id", required=True, help="Page ID")
    p.add_argument("--text", required=True, help="Comment text")

    # db
    sub_db = group("db", "Database operations")
    p = leaf(sub_db, "get", "Retrieve database metadata", cmd_db_get)
    p.add_argument("id", help="Database ID")

    # ds
    sub_ds = group("ds", "Data source operations")
    p = leaf(sub_ds, "get", "Retrieve a data source", cmd_ds_get)
    p.add_argument("id", help="Data source ID")

    p = leaf(sub_ds, "create", "Create a data source", cmd_ds_create)
    p.add_argument("--parent", required=True, help="Parent page ID")
    p.add_argument("--title", required=True, help="Title")
    p.add_argument("--properties", help="Properties schema as JSON string")

    p = leaf(sub_ds, "update", "Update a data source", cmd_ds_update)
    p.add_argument("id", help="Data source ID")
    p.add_argument("--data", required=True, help="Data as JSON string")

    p = leaf(sub_ds, "query", "Query a data source", cmd_ds_query)
    p.add_argument("id", help="Data source ID")
    p.add_argument("--filter", help="Filter as JSON string")
    p.add_argument("--sorts", help="Sorts as JSON string")

    p = leaf(sub_ds, "templates", "List templates in a data source", cmd_ds_templates)
    p.add_argument("id", help="Data source ID")

    # file-upload
    sub_fu = group("file-upload", "File upload operations")
    p = leaf(sub_fu, "create", "Create a file upload session", cmd_file_uploads_create)
    p.add_argument(
        "--mode", required=True, help="Upload mode: single_part, multi_part, or external_url"
    )
    p.add_argument("--filename", help="Filename for the upload")
    p.add_argument("--content-type", help="MIME content type")
    p.add_argument("--number-of-parts", type=int, help="Number of parts (multi_part mode)")
    p.add_argument("--external-url", help="External URL (external_url mode)")

    p = leaf(sub_fu, "send", "Send a file to an upload session", cmd_file_uploads_send)
    p.add_argument("id", help="File upload ID")
    p.add_argument("--file", required=True, help="Path to the file to upload")
    p.add_argument("--part-number", type=int, help="Part number (multi_part mode)")

    p = leaf(sub_fu, "complete", "Complete a file upload", cmd_file_uploads_complete)
    p.add_argument("id", help="File upload ID")
    p = leaf(sub_fu, "get", "Retrieve a file upload", cmd_file_uploads_get)
    p.add_argument("id", help="File upload ID")
    p = leaf(sub_fu, "list", "List file uploads", cmd_file_uploads_list)
    p.add_argument("--status", help="Filter by status")

    p = leaf(
        sub_fu, "upload", "Upload a file in one step (create + send + complete)", cmd_file_uploads_upload
    )
    p.add_argument("file", help="Path to the file to upload")
    p.add_argument("--content-type", help="MIME content type")

    return parser, groups


def main(argv=None):
    parser, groups = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0
    if args.cmd in groups:
        group_parser, dest = groups[args.cmd]
        if not getattr(args, dest, None):
            group_parser.print_help()
            return 0
    if args.raw:
        args.output = "raw"

    try:
        args.func(args)
    except CliError as e:
        print_error(str(e))
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
