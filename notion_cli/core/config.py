"""Configuration helpers for notion CLI."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Tuple

from .errors import ConfigError

CONFIG_PATH = Path(os.path.expanduser("~")) / ".notion-cli.json"
# Default API endpoint used when no base URL is configured
DEFAULT_BASE = "https://api.notion.com"
# Sent as the ``Notion-Version`` header on every request
NOTION_VERSION = "2025-09-03"

TOKEN_ENV = "NOTION_API_TOKEN"
BASE_URL_ENV = "NOTION_BASE_URL"


def load_config() -> Dict[str, Any]:
    """Load configuration from disk, then apply environment overrides."""
    cfg: Dict[str, Any] = {}
    if CONFIG_PATH.exists():
        try:
            cfg = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            cfg = {}
        if not isinstance(cfg, dict):
            cfg = {}
    if os.getenv(BASE_URL_ENV):
        cfg["base_url"] = os.getenv(BASE_URL_ENV)
    if os.getenv(TOKEN_ENV):
        cfg["token"] = os.getenv(TOKEN_ENV)
    return cfg


def save_config(token: str | None = None, base_url: str | None = None) -> Path:
    """Merge the given values into CONFIG_PATH and return the path."""
    cfg: Dict[str, Any] = {}
    if CONFIG_PATH.exists():
        try:
            cfg = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            cfg = {}
    if token is not None:
        cfg["token"] = token
    if base_url is not None:
        cfg["base_url"] = base_url.rstrip("/")
    CONFIG_PATH.write_text(json.dumps(cfg, ensure_ascii=False, indent=2), encoding="utf-8")
    # Owner-only on Unix; no-op on Windows.
    try:
        os.chmod(CONFIG_PATH, 0o600)
    except (OSError, NotImplementedError):
        pass
    return CONFIG_PATH


def get_base_url(cfg: Dict[str, Any]) -> str:
    """Configured base URL without a trailing slash, or DEFAULT_BASE."""
    return (cfg.get("base_url") or DEFAULT_BASE).rstrip("/")


def get_base_and_token() -> Tuple[str, str]:
    """Return API base URL and token or raise :class:`ConfigError`."""
    cfg = load_config()
    base = get_base_url(cfg)
    token = cfg.get("token")
    if not token:
        raise ConfigError(
            f"No API token configured. Run `notion init` or set {TOKEN_ENV} environment variable."
        )
    return base, token
