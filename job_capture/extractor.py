"""Extraction orchestrator.

classify -> site-specific pass -> generic fallback (only when company or
position is still empty) -> post-processing. Each call recomputes from the
live document; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .documents.base import PageDocument
from .models import JobRecord, SiteRule
from .normalize import post_process
from .resolve import apply_fallback, resolve_constant_or_field, resolve_field
from .sites import DEFAULT_SITE_RULES, find_rule
from .utils import hostname_or_raw

log = logging.getLogger(__name__)


class Extractor:
    """Turns a job posting page into a `JobRecord` using an ordered rule table."""

    def __init__(self, rules: Sequence[SiteRule] = DEFAULT_SITE_RULES) -> None:
        self._rules = tuple(rules)

    def extract(self, url: str, document: PageDocument) -> JobRecord:
        """Extract a record from `document`, the page loaded at `url`.

        Never raises for extraction itself; fields that cannot be found come
        back as empty strings.
        """
        rule = find_rule(url, self._rules)

        if rule is None:
            log.debug("No site rule for %s; using generic fallback", url)
            record = JobRecord(source=hostname_or_raw(url), url=url)
            record = apply_fallback(document, record)
        else:
            log.debug("Classified %s as %s", url, rule.site_id)
            record = JobRecord(
                source=rule.name,
                url=url,
                company_name=resolve_constant_or_field(document, rule.company_constant, rule.company),
                position=resolve_field(document, rule.position),
                location=resolve_field(document, rule.location),
            )
            if not record.company_name or not record.position:
                record = apply_fallback(document, record)

        record = post_process(record)
        if not record.has_details:
            log.debug("Could not extract job details from %s", url)
        return record


_default_extractor = Extractor()


def extract(url: str, document: PageDocument) -> JobRecord:
    """Extract a record using the built-in site rules."""
    return _default_extractor.extract(url, document)
