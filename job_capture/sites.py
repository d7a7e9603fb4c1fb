"""Known job sites: URL classification and per-site selector tables.

The registry is an ordered tuple; the first rule whose URL pattern appears in
the page URL wins. Selector candidates within a field are tried in order,
current markup first and legacy markup last.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .models import SiteId, SiteRule
from .utils import hostname_or_raw


DEFAULT_SITE_RULES: Tuple[SiteRule, ...] = (
    SiteRule(
        site_id=SiteId.LINKEDIN.value,
        name="LinkedIn",
        url_patterns=("linkedin.com/jobs",),
        company=(
            ".job-details-jobs-unified-top-card__company-name a",
            ".jobs-unified-top-card__company-name a",
            ".job-details-jobs-unified-top-card__company-name",
            ".jobs-unified-top-card__company-name",
        ),
        position=(
            ".job-details-jobs-unified-top-card__job-title h1",
            ".jobs-unified-top-card__job-title h1",
            ".job-details-jobs-unified-top-card__job-title",
            ".jobs-unified-top-card__job-title",
        ),
        location=(
            ".job-details-jobs-unified-top-card__primary-description-container .jobs-unified-top-card__bullet",
            ".jobs-unified-top-card__primary-description-container .jobs-unified-top-card__bullet",
            ".job-details-jobs-unified-top-card__bullet",
            ".jobs-unified-top-card__bullet",
        ),
    ),
    SiteRule(
        site_id=SiteId.INDEED.value,
        name="Indeed",
        url_patterns=("indeed.com",),
        company=(
            '[data-testid="inlineHeader-companyName"] a',
            ".jobsearch-CompanyInfoContainer a",
            '[data-testid="inlineHeader-companyName"]',
            ".jobsearch-InlineCompanyRating + a",
        ),
        position=(
            '[data-testid="jobsearch-JobInfoHeader-title"]',
            ".jobsearch-JobInfoHeader-title",
            "h1[data-jk]",
        ),
        location=(
            '[data-testid="job-location"]',
            ".jobsearch-JobInfoHeader-subtitle",
            '[data-testid="jobsearch-JobInfoHeader-subtitle"]',
        ),
    ),
    SiteRule(
        site_id=SiteId.GLASSDOOR.value,
        name="Glassdoor",
        url_patterns=("glassdoor.com",),
        company=(".employer-name", '[data-test="employer-name"]', ".employerName"),
        position=(".job-title", '[data-test="job-title"]', ".jobTitle"),
        location=(".job-location", '[data-test="job-location"]', ".jobLocation"),
    ),
    SiteRule(
        site_id=SiteId.GOOGLE.value,
        name="Google Careers",
        url_patterns=("careers.google.com",),
        company_constant="Google",
        position=(".gc-job-detail__title", "h1"),
        location=(".gc-job-detail__location",),
    ),
    SiteRule(
        site_id=SiteId.APPLE.value,
        name="Apple Jobs",
        url_patterns=("jobs.apple.com",),
        company_constant="Apple",
        position=(".hero-headline", "h1"),
        location=(".hero-location",),
    ),
    SiteRule(
        site_id=SiteId.MICROSOFT.value,
        name="Microsoft Careers",
        url_patterns=("careers.microsoft.com",),
        company_constant="Microsoft",
        position=(".job-title", "h1"),
        location=(".job-location",),
    ),
    SiteRule(
        site_id=SiteId.NETFLIX.value,
        name="Netflix Jobs",
        url_patterns=("jobs.netflix.com",),
        company_constant="Netflix",
        position=("h1", ".job-title"),
        location=(".job-location", ".location"),
    ),
    SiteRule(
        site_id=SiteId.LEVER.value,
        name="Lever",
        url_patterns=("jobs.lever.co",),
        company=(".main-header-text a", ".company-name", "header a"),
        position=(".posting-headline h2", ".posting-title", "h2"),
        location=(".posting-categories .location", ".posting-location", ".location"),
    ),
    SiteRule(
        site_id=SiteId.GREENHOUSE.value,
        name="Greenhouse",
        url_patterns=("boards.greenhouse.io",),
        company=(".company-name", "header h1", ".app-title"),
        position=(".app-title", ".job-title", "h1"),
        location=(".location", ".job-location"),
    ),
)


# Broader than the extraction registry: these only light up the extension
# icon. Sites without a rule above go through the generic fallback.
JOB_PAGE_PATTERNS: Tuple[str, ...] = (
    "linkedin.com/jobs",
    "indeed.com/viewjob",
    "glassdoor.com/job-listing",
    "jobs.lever.co",
    "boards.greenhouse.io",
    "careers.google.com",
    "jobs.apple.com",
    "careers.microsoft.com",
    "jobs.netflix.com",
    "careers.stripe.com",
    "jobs.spotify.com",
    "uber.com/careers",
    "tesla.com/careers",
    "metacareers.com",
    "careers.airbnb.com",
)


def find_rule(url: str, rules: Sequence[SiteRule] = DEFAULT_SITE_RULES) -> Optional[SiteRule]:
    """Return the first rule whose URL patterns match, or None."""
    if not url:
        return None
    for rule in rules:
        if rule.matches(url):
            return rule
    return None


def classify(url: str, rules: Sequence[SiteRule] = DEFAULT_SITE_RULES) -> str:
    """Map a page URL to a site identifier (`SiteId.UNKNOWN` when unrecognized)."""
    rule = find_rule(url, rules)
    return rule.site_id if rule else SiteId.UNKNOWN.value


def source_name(url: str, rules: Sequence[SiteRule] = DEFAULT_SITE_RULES) -> str:
    """Human-readable source for a page: the site name, else its hostname."""
    rule = find_rule(url, rules)
    if rule:
        return rule.name
    return hostname_or_raw(url)


def is_job_posting_page(url: str) -> bool:
    """Whether the URL looks like a job posting (drives the extension icon)."""
    return any(pattern in (url or "") for pattern in JOB_PAGE_PATTERNS)
