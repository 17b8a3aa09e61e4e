"""Repair provider-mangled anchors and shorten links that display their own URL."""

from __future__ import annotations

import html
import logging
import re
from urllib.parse import unquote

from .patterns import (
    ELLIPSIS_LINK,
    FILE_EXTENSION,
    QUERY_STRING,
    SELF_REFERENTIAL_LINK,
    TRUNCATED_LINK,
    URL_FRAGMENT,
)

logger = logging.getLogger(__name__)

DEFAULT_PROTOCOL = "http://"


def repair_links(text: str) -> str:
    """Undo known provider truncation of anchor tags.

    Ellipsis-shortened link text is restored to the full URL so that
    :func:`shorten_link_text` can produce a consistent display name, and
    URL tails stranded after a prematurely closed tag are moved back inside.
    """
    text = ELLIPSIS_LINK.sub(_restore_ellipsis_link, text)
    return TRUNCATED_LINK.sub(_restore_truncated_link, text)


def _restore_ellipsis_link(match: re.Match[str]) -> str:
    protocol = match.group("protocol") or ""
    url = match.group("domain") + match.group("path")
    return f'<a href="{protocol}{url}">{url}</a>'


def _restore_truncated_link(match: re.Match[str]) -> str:
    # Only links that display their own URL are truncated by providers.
    if not match.group("href").endswith(match.group("text")):
        return match.group(0)
    tail = match.group("tail")
    logger.debug("Restoring truncated link tail %r", tail)
    return (
        f'<a href="{match.group("href")}{tail}"{match.group("attrs")}>'
        f'{match.group("text")}{tail}</a>'
    )


def shorten_link_text(text: str) -> str:
    """Replace link text that repeats the URL with domain and page name."""
    return SELF_REFERENTIAL_LINK.sub(_shorten, text)


def _shorten(match: re.Match[str]) -> str:
    protocol = match.group("protocol") or DEFAULT_PROTOCOL
    url = match.group("url")
    display = shortened_url(url)
    logger.debug("Shortened link text %r to %r", url, display)
    return f'<a href="{protocol}{url}">{display}</a>'


def shortened_url(url: str) -> str:
    """Domain plus the last meaningful path segment of a protocol-less URL.

    ``www.example.com/a/b/c.html?x=1`` becomes ``example.com/…/c``.
    """
    parts = url.split("/")
    domain = parts[0].removeprefix("www.")

    # page precedes a trailing slash
    last = len(parts) - 2 if url.endswith("/") else len(parts) - 1
    if last > 0 and parts[last][:1] in ("?", "#"):
        last -= 1
    if last <= 0:
        return html.escape(domain, quote=False)

    page = QUERY_STRING.sub("", parts[last])
    page = URL_FRAGMENT.sub("", page)
    page = FILE_EXTENSION.sub("", page)
    middle = "/…/" if last > 1 else "/"

    return html.escape(domain + middle + unquote(page), quote=False)
