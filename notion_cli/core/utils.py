"""Utility functions for notion CLI commands."""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Tuple

from .config import get_base_and_token
from .errors import ConfigError
from .http import NotionClient

__all__ = [
    "get_client",
    "parse_json_arg",
    "parse_bool",
    "pagination_query",
    "add_pagination",
]

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}


def get_client(args) -> NotionClient:
    """Build a gateway from saved config and the global CLI flags."""
    base, token = get_base_and_token()
    return NotionClient(
        token,
        base,
        dry_run=getattr(args, "dry_run", False),
        verbose=getattr(args, "verbose", False),
    )


def parse_json_arg(text: str, what: str) -> Any:
    """Parse a JSON command-line value with a friendly error on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON for {what}: {e.msg} at position {e.pos}") from None


def parse_bool(value: str) -> bool:
    """argparse ``type`` for flags like ``--archived true``."""
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def pagination_query(args) -> List[Tuple[str, str]]:
    """Query pairs for GET endpoints that accept ``page_size``/``start_cursor``."""
    query: List[Tuple[str, str]] = []
    if getattr(args, "page_size", None) is not None:
        query.append(("page_size", str(args.page_size)))
    if getattr(args, "start_cursor", None):
        query.append(("start_cursor", args.start_cursor))
    return query


def add_pagination(body: Dict[str, Any], args) -> Dict[str, Any]:
    """Same as :func:`pagination_query` but for POST bodies (search, query)."""
    if getattr(args, "page_size", None) is not None:
        body["page_size"] = args.page_size
    if getattr(args, "start_cursor", None):
        body["start_cursor"] = args.start_cursor
    return body
