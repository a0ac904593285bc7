"""File upload commands.

Notion uploads are a three step protocol: create an upload object, send the
bytes to it (multipart), then complete it.  ``file-upload upload`` runs all
three in order; the other subcommands expose each step on its own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from tqdm import tqdm

from ..core import (
    FileError,
    NotionClient,
    ResponseParseError,
    get_client,
    pagination_query,
    print_result,
    print_success,
)

# Placeholder used in dry-run previews where the create step returns no id
DRY_RUN_UPLOAD_ID = "<file-upload-id>"


def cmd_file_uploads_create(args):
    body: Dict[str, Any] = {"mode": args.mode}
    if args.filename:
        body["filename"] = args.filename
    if args.content_type:
        body["content_type"] = args.content_type
    if args.number_of_parts is not None:
        body["number_of_parts"] = args.number_of_parts
    if args.external_url:
        body["external_url"] = args.external_url

    client = get_client(args)
    print_result(client.post("/v1/file_uploads", body), args.output)


def cmd_file_uploads_send(args):
    client = get_client(args)
    result = client.post_multipart(f"/v1/file_uploads/{args.id}/send", args.file, args.part_number)
    print_result(result, args.output)


def cmd_file_uploads_complete(args):
    client = get_client(args)
    print_result(client.post(f"/v1/file_uploads/{args.id}/complete"), args.output)


def cmd_file_uploads_get(args):
    client = get_client(args)
    print_result(client.get(f"/v1/file_uploads/{args.id}"), args.output)


def cmd_file_uploads_list(args):
    query = []
    if args.status:
        query.append(("status", args.status))
    query += pagination_query(args)

    client = get_client(args)
    print_result(client.get("/v1/file_uploads", query), args.output)


def upload_file(client: NotionClient, file_path, content_type: str | None = None) -> Any:
    """Create, send and complete a single-part upload; return the final object."""

    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileError(f"Failed to read file: {file_path}: no such file")
    filename = file_path.name

    with tqdm(total=3, unit="step", desc="Creating upload") as bar:
        body: Dict[str, Any] = {"mode": "single_part", "filename": filename}
        if content_type:
            body["content_type"] = content_type
        created = client.post("/v1/file_uploads", body)
        upload_id = created.get("id") if isinstance(created, dict) else None
        if not isinstance(upload_id, str):
            if not client.dry_run:
                raise ResponseParseError("Missing upload ID in create response")
            upload_id = DRY_RUN_UPLOAD_ID
        bar.update(1)

        bar.set_description("Sending file")
        client.post_multipart(f"/v1/file_uploads/{upload_id}/send", file_path)
        bar.update(1)

        bar.set_description("Completing upload")
        result = client.post(f"/v1/file_uploads/{upload_id}/complete")
        bar.update(1)
    return result


def cmd_file_uploads_upload(args):
    client = get_client(args)
    result = upload_file(client, args.file, args.content_type)
    if not client.dry_run:
        print_success(f"File '{Path(args.file).name}' uploaded successfully")
    print_result(result, args.output)
