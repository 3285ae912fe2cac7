"""Load and decode the JSON document to render.

A source is either ``"-"`` (standard input), an ``http://`` / ``https://``
URL, or a filesystem path.
"""

from __future__ import annotations

import importlib.metadata
import json
import logging
import pathlib
import sys
from typing import Any, TextIO

import requests

from terrafactor.errors import (
    DocumentParseError,
    DocumentReadError,
    DocumentRequestError,
    DocumentResponseError,
)

logger = logging.getLogger(__name__)

STDIN_SOURCE: str = "-"

try:
    _VERSION: str = importlib.metadata.version("terrafactor")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"terrafactor/{_VERSION}"


def is_url(source: str) -> bool:
    """Return ``True`` if *source* should be fetched over HTTP."""
    return source.startswith(("http://", "https://"))


def fetch_text(url: str, timeout_s: float = 30.0, verify_tls: bool = True) -> str:
    """GET *url* and return the response body as text.

    Raises:
        DocumentRequestError: On any transport-level failure.
        DocumentResponseError: On a non-2xx HTTP status code.
    """
    with requests.Session() as session:
        session.headers.update({"User-Agent": _USER_AGENT, "Accept": "application/json"})
        try:
            resp = session.get(url, timeout=timeout_s, verify=verify_tls)
        except requests.exceptions.RequestException as exc:
            raise DocumentRequestError(url, exc) from exc
    if not resp.ok:
        raise DocumentResponseError(resp.status_code, resp.url)
    return resp.text


def read_text(source: str, stdin: TextIO | None = None) -> str:
    """Read a local document from a path, or from *stdin* when *source* is ``"-"``.

    Raises:
        DocumentReadError: If the file or stream cannot be read.
    """
    try:
        if source == STDIN_SOURCE:
            return (stdin if stdin is not None else sys.stdin).read()
        return pathlib.Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(source, exc) from exc


def parse_document(text: str, source: str = "<string>") -> Any:
    """Decode JSON *text* into a generic value.

    Raises:
        DocumentParseError: If *text* is not valid JSON.
    """
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        # Oversized integer literals and very deep nesting fail outside JSONDecodeError.
        raise DocumentParseError(source, exc) from exc


def load_document(
    source: str,
    *,
    timeout_s: float = 30.0,
    verify_tls: bool = True,
    stdin: TextIO | None = None,
) -> Any:
    """Read *source* and return the decoded JSON value.

    Args:
        source: ``"-"``, an HTTP(S) URL, or a path.
        timeout_s: Request timeout in seconds for URL sources.
        verify_tls: Whether to verify TLS certificates for ``https`` sources.
        stdin: Stream used for ``"-"`` (default ``sys.stdin``).

    Returns:
        The decoded value (dict, list, scalar or ``None``).

    Raises:
        DocumentError: Subclass describing the read, fetch or parse failure.
    """
    if is_url(source):
        logger.debug("Fetching document from %s (timeout=%.1fs)", source, timeout_s)
        text = fetch_text(source, timeout_s=timeout_s, verify_tls=verify_tls)
    else:
        logger.debug("Reading document from %s", "stdin" if source == STDIN_SOURCE else source)
        text = read_text(source, stdin=stdin)
    logger.debug("Read %d characters from %s", len(text), source)
    return parse_document(text, source)
