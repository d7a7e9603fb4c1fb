"""Field resolution against a page document.

`resolve_field` is the primitive: try selector candidates in order and stop at
the first element with non-empty text. `apply_fallback` runs the generic
cascade (structured meta tags first, then class/heading patterns) for the
fields the site-specific pass left empty.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .documents.base import PageDocument
from .models import JobRecord

log = logging.getLogger(__name__)


GENERIC_COMPANY_SELECTORS = (
    ".company",
    ".employer",
    '[class*="company"]',
    '[class*="employer"]',
)

GENERIC_POSITION_SELECTORS = (
    "h1",
    ".title",
    ".job-title",
    '[class*="title"]',
    '[class*="job"]',
)

GENERIC_LOCATION_SELECTORS = (
    ".location",
    '[class*="location"]',
    '[class*="address"]',
)

COMPANY_META = ("og:site_name", "author")
POSITION_META = ("og:title",)


def resolve_field(document: PageDocument, candidates: Sequence[str]) -> str:
    """Return the trimmed text of the first candidate that matches non-empty text.

    Only the first element per selector is considered. A candidate that fails
    (bad selector syntax, a broken document) counts as no match.
    """
    for selector in candidates:
        try:
            text = document.query_first_text(selector)
        except Exception as exc:
            log.debug("Selector %r failed: %s", selector, exc)
            continue
        if text and text.strip():
            return text.strip()
    return ""


def _first_meta(document: PageDocument, names: Sequence[str]) -> str:
    for name in names:
        try:
            content = document.query_meta(name)
        except Exception as exc:
            log.debug("Meta lookup %r failed: %s", name, exc)
            continue
        if content and content.strip():
            return content.strip()
    return ""


def _title(document: PageDocument) -> str:
    try:
        return (document.title() or "").strip()
    except Exception as exc:
        log.debug("Title lookup failed: %s", exc)
        return ""


def _company(document: PageDocument) -> str:
    return _first_meta(document, COMPANY_META) or resolve_field(document, GENERIC_COMPANY_SELECTORS)


def _position(document: PageDocument) -> str:
    return (
        _first_meta(document, POSITION_META)
        or _title(document)
        or resolve_field(document, GENERIC_POSITION_SELECTORS)
    )


def apply_fallback(document: PageDocument, record: JobRecord) -> JobRecord:
    """Fill empty company/position/location from generic page patterns.

    Fields that already hold a value are never overwritten.
    """
    update = {}
    if not record.company_name:
        update["company_name"] = _company(document)
    if not record.position:
        update["position"] = _position(document)
    if not record.location:
        update["location"] = resolve_field(document, GENERIC_LOCATION_SELECTORS)

    filled = [name for name, value in update.items() if value]
    log.debug("Fallback filled %s for %s", filled or "nothing", record.url)
    return record.model_copy(update=update)


def resolve_constant_or_field(
    document: PageDocument, constant: Optional[str], candidates: Sequence[str]
) -> str:
    """Use `constant` when the site pins a value, otherwise resolve the candidates."""
    if constant:
        return constant
    return resolve_field(document, candidates)
