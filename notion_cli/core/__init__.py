"""Core utilities for notion CLI."""

from .config import (
    CONFIG_PATH,
    DEFAULT_BASE,
    NOTION_VERSION,
    load_config,
    save_config,
    get_base_and_token,
    get_base_url,
)
from .errors import (
    CliError,
    ConfigError,
    NetworkError,
    ApiError,
    RateLimitExceeded,
    ResponseParseError,
    FileError,
)
from .http import MAX_RETRIES, NotionClient, mime_from_filename
from .output import parse_output_format, print_result, print_success, print_info, print_error
from .utils import get_client, parse_json_arg, parse_bool, pagination_query, add_pagination

__all__ = [
    "CONFIG_PATH", "DEFAULT_BASE", "NOTION_VERSION",
    "load_config", "save_config", "get_base_and_token", "get_base_url",
    "CliError", "ConfigError", "NetworkError", "ApiError", "RateLimitExceeded",
    "ResponseParseError", "FileError",
    "MAX_RETRIES", "NotionClient", "mime_from_filename",
    "parse_output_format", "print_result", "print_success", "print_info", "print_error",
    "get_client", "parse_json_arg", "parse_bool", "pagination_query", "add_pagination",
]
