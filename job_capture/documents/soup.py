"""BeautifulSoup-backed page documents.

`SoupDocument` wraps parsed HTML (saved pages, fetched pages, test fixtures)
and answers CSS selector queries through soupsieve.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import httpx
from bs4 import BeautifulSoup

from .base import PageDocument

log = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml",
}


class SoupDocument(PageDocument):
    """A parsed HTML page."""

    def __init__(self, html: Union[str, bytes, BeautifulSoup]) -> None:
        if isinstance(html, BeautifulSoup):
            self._soup = html
        else:
            self._soup = BeautifulSoup(html, "html.parser")

    def query_first_text(self, selector: str) -> Optional[str]:
        # Invalid selectors raise soupsieve.SelectorSyntaxError; callers guard.
        element = self._soup.select_one(selector)
        if element is None:
            return None
        return element.get_text()

    def query_meta(self, name: str) -> Optional[str]:
        for attr in ("property", "name"):
            tag = self._soup.find("meta", attrs={attr: name})
            if tag is None:
                continue
            content = (tag.get("content") or "").strip()
            if content:
                return content
        return None

    def title(self) -> str:
        tag = self._soup.title
        if tag is None:
            return ""
        return tag.get_text().strip()


def fetch_document(url: str, timeout_s: float = 20.0) -> SoupDocument:
    """Download a page and parse it.

    Raises:
        httpx.HTTPError: on transport failures or a non-2xx response.
    """
    with httpx.Client(timeout=timeout_s, follow_redirects=True, headers=DEFAULT_HEADERS) as client:
        resp = client.get(url)
        resp.raise_for_status()
    log.debug("Fetched %s (%d bytes)", resp.url, len(resp.content))
    return SoupDocument(resp.text)
