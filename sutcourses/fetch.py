"""Downloading registrar pages, which are served in the Thai windows-874 encoding."""

from __future__ import annotations

import codecs
import logging
import re

import httpx

logger = logging.getLogger(__name__)

_BYTE_ORDER_MARKS = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)
_ESCAPED_BYTE = re.compile("[\udc80-\udcff]")
# Bytes the web encoding maps straight onto C1 control characters.
_C1_PASSTHROUGH = frozenset(
    [*range(0x81, 0x85), *range(0x86, 0x91), *range(0x98, 0xA0)]
)


def _decode_unicode(content: bytes, encoding: str) -> tuple[str, bool]:
    try:
        return content.decode(encoding), False
    except UnicodeDecodeError:
        return content.decode(encoding, errors="replace"), True


def _decode_windows_874(content: bytes) -> tuple[str, bool]:
    had_errors = False

    def restore(match: re.Match[str]) -> str:
        nonlocal had_errors
        byte = ord(match.group()) - 0xDC00
        if byte in _C1_PASSTHROUGH:
            return chr(byte)
        had_errors = True
        return "\ufffd"

    text = content.decode("cp874", errors="surrogateescape")
    return _ESCAPED_BYTE.sub(restore, text), had_errors


def decode_html(content: bytes) -> str:
    """Decode a page body as windows-874, honouring a leading byte order mark."""
    for mark, encoding in _BYTE_ORDER_MARKS:
        if content.startswith(mark):
            text, had_errors = _decode_unicode(content[len(mark):], encoding)
            break
    else:
        text, had_errors = _decode_windows_874(content)
    if had_errors:
        logger.warning("Decoding errors occurred while fetching HTML")
    return text


async def fetch_html(url: str, client: httpx.AsyncClient | None = None) -> str:
    """Download ``url`` and return its decoded body, whatever the status code."""
    logger.info("Fetching HTML from: %s", url)
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            response = await own_client.get(url)
    else:
        response = await client.get(url, follow_redirects=True)
    return decode_html(response.content)