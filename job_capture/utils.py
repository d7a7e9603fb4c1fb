"""Utility helpers shared across the engine."""

from __future__ import annotations

from typing import Iterable, List
from urllib.parse import urlparse


def hostname_or_raw(url: str) -> str:
    """Return the URL's hostname, or the raw URL when none can be parsed."""
    try:
        host = urlparse(url).hostname
    except ValueError:
        return url
    return host or url


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Deduplicate while preserving first-seen order."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it:
            continue
        key = it.strip()
        if key in seen:
            continue
        seen.add(key)
        out.append(key)
    return out
