"""Exception hierarchy for notion CLI.

Every error the CLI raises derives from :class:`CliError` so the entry point
can print it and exit with ``exit_code``.  Nothing in here imports other
project modules.
"""

from __future__ import annotations

from http import HTTPStatus


class CliError(Exception):
    """Exit code 1: network, API and parse failures."""

    exit_code = 1


class ConfigError(CliError):
    """Exit code 2: missing or malformed token, bad local input."""

    exit_code = 2


class NetworkError(CliError):
    """The request never got an HTTP response (DNS, refused, timeout)."""


class ResponseParseError(CliError):
    """The response body was not valid JSON."""


class FileError(CliError):
    """A local file could not be read."""


def _status_label(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)


class ApiError(CliError):
    """Non-2xx response carrying Notion's ``code`` and ``message``."""

    def __init__(self, status: int, code: str, message: str):
        self.status = status
        self.code = code
        self.message = message
        super().__init__(f"Notion API error ({_status_label(status)}): [{code}] {message}")


class RateLimitExceeded(ApiError):
    """429 still returned after the retry budget ran out."""
