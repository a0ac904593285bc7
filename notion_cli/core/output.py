"""Printing helpers shared by all commands."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

OUTPUT_FORMATS = ("pretty", "json", "raw")


def parse_output_format(value: str) -> str:
    """Normalise an ``--output`` value; used as an argparse ``type``."""
    fmt = value.lower()
    if fmt not in OUTPUT_FORMATS:
        raise argparse.ArgumentTypeError(f"Unknown output format: {value}")
    return fmt


def print_result(value: Any, fmt: str = "pretty") -> None:
    if fmt == "raw":
        print(json.dumps(value, ensure_ascii=False, separators=(",", ":")))
    else:
        print(json.dumps(value, ensure_ascii=False, indent=2))


def print_success(msg: str) -> None:
    print(f"✓ {msg}")


def print_info(msg: str) -> None:
    print(f"→ {msg}")


def print_error(msg: str) -> None:
    print(f"✗ {msg}", file=sys.stderr)
