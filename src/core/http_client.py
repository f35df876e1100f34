"""
HTTP GET and response formatting.

Failures are raised as RequestError subclasses so the caller can show them
instead of crashing the interface.
"""

import json
import re
from typing import Optional

import httpx

SECURE_SCHEME = "https://"
SCHEME_PREFIX = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


class RequestError(Exception):
    kind = "request"


class TransportError(RequestError):
    """The request never produced a response (DNS, connect, timeout, bad URL)."""
    kind = "transport"


class FormatError(RequestError):
    """The response body could not be pretty-printed."""
    kind = "format"


def normalize_url(url: str) -> str:
    url = url.strip()
    if SCHEME_PREFIX.match(url):
        return url
    return SECURE_SCHEME + url


async def fetch(
    url: str,
    *,
    timeout: Optional[float] = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """
    Perform a single GET request.

    Args:
        url: already normalized target
        timeout: seconds, or None to wait forever
        transport: optional httpx transport, used by tests

    Returns:
        The response with its body read.
    """
    if url.strip() in ("", SECURE_SCHEME):
        raise TransportError("URL is empty")

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            return await client.get(url)
    except httpx.InvalidURL as exc:
        raise TransportError(f"invalid URL {url!r}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__) from exc


def format_body(text: str, indent: int = 2) -> str:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise FormatError(f"response is not JSON ({exc})") from exc
    except RecursionError as exc:
        raise FormatError("response is nested too deeply to format") from exc
    return json.dumps(data, indent=indent, ensure_ascii=False)


def status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()
