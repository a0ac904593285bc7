"""HTTP gateway for the Notion API.

The implementation uses :mod:`urllib` from the Python standard library.  A
single :class:`NotionClient` owns the auth headers, the dry-run switch and the
rate-limit retry loop; command handlers only pick a verb, a path and a body.

Each verb hands :meth:`NotionClient._send_with_retry` a zero-argument builder
that returns a fresh :class:`~urllib.request.Request`.  Request bodies (JSON or
multipart, file bytes included) are encoded once up front, so calling the
builder again on a retry produces an identical request.
"""

from __future__ import annotations

import json
import sys
import time
import uuid
from collections.abc import Callable, Iterable, Mapping
from http.client import HTTPException
from pathlib import Path
from typing import Any, Dict, Tuple
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from .config import DEFAULT_BASE, NOTION_VERSION
from .errors import (
    ApiError,
    ConfigError,
    FileError,
    NetworkError,
    RateLimitExceeded,
    ResponseParseError,
)

MAX_RETRIES = 3
INITIAL_BACKOFF_MS = 500
JSON_TIMEOUT = 60
UPLOAD_TIMEOUT = 120

MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "pdf": "application/pdf",
    "json": "application/json",
    "csv": "text/csv",
    "txt": "text/plain",
    "html": "text/html",
    "htm": "text/html",
    "mp4": "video/mp4",
    "mp3": "audio/mpeg",
    "zip": "application/zip",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}
DEFAULT_MIME = "application/octet-stream"

Query = Iterable[Tuple[str, str]] | Mapping[str, str] | None


def mime_from_filename(filename: str) -> str:
    """Return the MIME type for ``filename`` based on its extension."""
    ext = filename.rsplit(".", 1)[-1].lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME)


def _is_header_safe(value: str) -> bool:
    """True if ``value`` can be sent verbatim as an HTTP header value."""
    return all(ch == "\t" or (32 <= ord(ch) <= 255 and ord(ch) != 127) for ch in value)


def _parse_retry_after(headers) -> int | None:
    """Return Retry-After seconds from response headers, or None."""
    if not headers:
        return None
    value = headers.get("retry-after")
    if value is None:
        return None
    try:
        secs = int(str(value).strip())
    except ValueError:
        return None
    return secs if secs >= 0 else None


def _retry_wait_ms(headers, attempt: int) -> int:
    retry_after = _parse_retry_after(headers)
    if retry_after is not None:
        return retry_after * 1000
    return INITIAL_BACKOFF_MS * (2**attempt)


def _encode_multipart(fields: Dict[str, object]) -> Tuple[bytes, str]:
    """Encode ``fields`` as multipart/form-data.

    Each value is either a simple string/bytes or a tuple
    ``(filename, content, ctype)`` for file parts.  Returns the body and the
    matching ``Content-Type`` header value.
    """

    boundary = f"----notioncli{uuid.uuid4().hex}"

    def to_b(x):
        return x if isinstance(x, (bytes, bytearray)) else str(x).encode("utf-8")

    parts: list[bytes] = []
    for name, value in fields.items():
        parts.append(f"--{boundary}\r\n".encode())
        if isinstance(value, tuple):
            filename, content, ctype = value
            parts.append(
                f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'.encode()
            )
            parts.append(f"Content-Type: {ctype}\r\n\r\n".encode())
            parts.append(to_b(content))
            parts.append(b"\r\n")
        else:
            parts.append(f'Content-Disposition: form-data; name="{name}"\r\n\r\n'.encode())
            parts.append(to_b(value))
            parts.append(b"\r\n")
    parts.append(f"--{boundary}--\r\n".encode())
    return b"".join(parts), f"multipart/form-data; boundary={boundary}"


class NotionClient:
    """Authenticated gateway with dry-run interception and 429 retries."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE,
        *,
        dry_run: bool = False,
        verbose: bool = False,
    ) -> None:
        if not _is_header_safe(token):
            raise ConfigError("Invalid API token format")
        self.base_url = base_url
        self.dry_run = dry_run
        self.verbose = verbose
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Notion-Version": NOTION_VERSION,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def set_dry_run(self, dry_run: bool) -> None:
        self.dry_run = dry_run

    # --- verbs -------------------------------------------------------------

    def get(self, path: str, query: Query = None) -> Any:
        url = self._url(path, query)
        return self._send_with_retry(lambda: self._request("GET", url), "GET", path)

    def post(self, path: str, body: Any = None) -> Any:
        if self.dry_run:
            return self._print_dry_run("POST", path, body)
        url = self._url(path)
        data = _encode_json(body)
        return self._send_with_retry(lambda: self._request("POST", url, data), "POST", path)

    def patch(self, path: str, body: Any) -> Any:
        if self.dry_run:
            return self._print_dry_run("PATCH", path, body)
        url = self._url(path)
        data = _encode_json(body)
        return self._send_with_retry(lambda: self._request("PATCH", url, data), "PATCH", path)

    def delete(self, path: str) -> Any:
        if self.dry_run:
            return self._print_dry_run("DELETE", path, None)
        url = self._url(path)
        return self._send_with_retry(lambda: self._request("DELETE", url), "DELETE", path)

    def post_multipart(self, path: str, file_path, part_number: int | None = None) -> Any:
        """Upload ``file_path`` as the ``file`` part of a multipart POST.

        The file is read before anything else so a missing file fails with
        :class:`FileError` even in dry-run mode and never reaches the network.
        """

        file_path = Path(file_path)
        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise FileError(f"Failed to read file: {file_path}: {e.strerror or e}") from e

        if self.dry_run:
            print(f"[dry-run] POST {self.base_url}{path}", file=sys.stderr)
            print(f"[dry-run] File: {file_path} ({len(content)} bytes)", file=sys.stderr)
            if part_number is not None:
                print(f"[dry-run] Part number: {part_number}", file=sys.stderr)
            return {
                "dry_run": True,
                "method": "POST",
                "path": path,
                "file": str(file_path),
                "file_size": len(content),
            }

        file_name = file_path.name or "file"
        fields: Dict[str, object] = {"file": (file_name, content, mime_from_filename(file_name))}
        if part_number is not None:
            fields["part_number"] = str(part_number)
        data, content_type = _encode_multipart(fields)

        url = self._url(path)
        return self._send_with_retry(
            lambda: self._request("POST", url, data, content_type=content_type),
            "POST",
            path,
            timeout=UPLOAD_TIMEOUT,
        )

    # --- internals ---------------------------------------------------------

    def _url(self, path: str, query: Query = None) -> str:
        url = f"{self.base_url}{path}"
        if query:
            qs = urlencode(query if isinstance(query, Mapping) else list(query))
            if qs:
                url = f"{url}?{qs}"
        return url

    def _request(
        self,
        method: str,
        url: str,
        data: bytes | None = None,
        *,
        content_type: str | None = None,
    ) -> Request:
        headers = dict(self._headers)
        if content_type:
            headers["Content-Type"] = content_type
        return Request(url=url, method=method, headers=headers, data=data)

    def _print_dry_run(self, method: str, path: str, body: Any) -> Dict[str, Any]:
        print(f"[dry-run] {method} {self.base_url}{path}", file=sys.stderr)
        if body is not None:
            print(f"[dry-run] Body: {json.dumps(body, ensure_ascii=False, indent=2)}", file=sys.stderr)
        return {"dry_run": True, "method": method, "path": path}

    def _send_with_retry(
        self,
        build_request: Callable[[], Request],
        method: str,
        path: str,
        *,
        timeout: int = JSON_TIMEOUT,
    ) -> Any:
        attempt = 0
        while True:
            req = build_request()
            start = time.perf_counter()
            self._log_http_event(phase="request", method=method, path=path, attempt=attempt + 1)
            try:
                with urlopen(req, timeout=timeout) as resp:
                    status = getattr(resp, "status", 200)
                    raw = resp.read()
            except HTTPError as e:
                status = e.code
                headers = e.headers
                with e:
                    raw = self._read_error_body(e, method, path)
                will_retry = status == 429 and attempt < MAX_RETRIES
                self._log_http_event(
                    phase="response",
                    method=method,
                    path=path,
                    attempt=attempt + 1,
                    status=status,
                    will_retry=will_retry,
                    latency_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                if will_retry:
                    wait_ms = _retry_wait_ms(headers, attempt)
                    print(
                        f"Rate limited (429). Retrying in {wait_ms}ms "
                        f"(attempt {attempt + 1}/{MAX_RETRIES})",
                        file=sys.stderr,
                    )
                    time.sleep(wait_ms / 1000)
                    attempt += 1
                    continue
                return _handle_response(status, raw)
            except URLError as e:
                self._log_http_event(phase="network_error", method=method, path=path, error=str(e.reason))
                raise NetworkError(f"{method} {path}: {e.reason}") from e
            except (OSError, HTTPException) as e:
                # timeouts, resets, truncated bodies and malformed status lines
                self._log_http_event(phase="network_error", method=method, path=path, error=str(e))
                raise NetworkError(f"{method} {path}: {e}") from e

            self._log_http_event(
                phase="response",
                method=method,
                path=path,
                attempt=attempt + 1,
                status=status,
                bytes=len(raw),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return _handle_response(status, raw)

    def _read_error_body(self, err: HTTPError, method: str, path: str) -> bytes:
        try:
            return err.read()
        except (OSError, HTTPException) as e:
            self._log_http_event(phase="network_error", method=method, path=path, error=str(e))
            raise NetworkError(f"{method} {path}: {e}") from e

    def _log_http_event(self, **fields) -> None:
        """Emit structured HTTP logs to stderr when verbose mode is on."""
        if not self.verbose:
            return
        print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _encode_json(body: Any) -> bytes | None:
    if body is None:
        return None
    return json.dumps(body).encode("utf-8")


def _handle_response(status: int, raw: bytes) -> Any:
    """Return the parsed body for 2xx, raise the matching error otherwise."""
    try:
        body = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise ResponseParseError(f"Failed to parse response as JSON (HTTP {status})") from e

    if 200 <= status < 300:
        return body

    message = "Unknown error"
    code = "unknown"
    if isinstance(body, dict):
        if isinstance(body.get("message"), str):
            message = body["message"]
        if isinstance(body.get("code"), str):
            code = body["code"]
    if status == 429:
        raise RateLimitExceeded(status, code, message)
    raise ApiError(status, code, message)
