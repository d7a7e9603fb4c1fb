"""Data models for the job capture engine.

`JobRecord` is what extraction hands back to the caller: one record per page,
always whitespace-normalized, never partially typed. `SiteRule` is the
per-site extraction configuration, and `ApplicationPayload` is the create body
the tracker API expects when a record is saved.

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


Department = Literal[
    "Engineering",
    "Marketing",
    "Sales",
    "Product",
    "Design",
    "Operations",
    "Finance",
    "Legal",
    "HR",
    "Data",
    "Security",
    "",
]

ApplicationStatus = Literal["applied", "screening", "interview", "offer", "rejected"]


class SiteId(str, Enum):
    LINKEDIN = "linkedin"
    INDEED = "indeed"
    GLASSDOOR = "glassdoor"
    GOOGLE = "google"
    APPLE = "apple"
    MICROSOFT = "microsoft"
    NETFLIX = "netflix"
    LEVER = "lever"
    GREENHOUSE = "greenhouse"
    UNKNOWN = "unknown"


class JobRecord(BaseModel):
    """A best-effort record of a single job posting page.

    Missing values are empty strings rather than None so the record can be
    dropped straight into an editable form.
    """

    source: str = Field(..., description="Site name (e.g. 'LinkedIn') or the page hostname.")
    company_name: str = ""
    position: str = ""
    location: str = ""
    department: Department = Field(default="", description="Inferred from the position, never scraped.")
    url: str

    @property
    def has_details(self) -> bool:
        """False when neither company nor position could be found."""
        return bool(self.company_name or self.position)


class SiteRule(BaseModel):
    """Extraction rules for one known site.

    Each field maps to an ordered tuple of CSS selector candidates, most
    current markup first. Single-employer career pages set `company_constant`
    instead of scraping the company.
    """

    model_config = ConfigDict(frozen=True)

    site_id: str
    name: str
    url_patterns: Tuple[str, ...]
    company: Tuple[str, ...] = ()
    company_constant: Optional[str] = None
    position: Tuple[str, ...] = ()
    location: Tuple[str, ...] = ()

    def matches(self, url: str) -> bool:
        return any(pattern in url for pattern in self.url_patterns)


class ApplicationPayload(BaseModel):
    """Create payload for `POST /api/applications` on the tracker server."""

    model_config = ConfigDict(populate_by_name=True)

    company_name: str = Field(..., alias="companyName", min_length=1)
    position: str = Field(..., min_length=1)
    location: str = ""
    department: str = ""
    notes: str = ""
    status: ApplicationStatus = "applied"
    application_date: date = Field(default_factory=date.today, alias="applicationDate")
    job_url: str = Field(default="", alias="jobUrl")

    @classmethod
    def from_record(cls, record: JobRecord, notes: Optional[str] = None) -> "ApplicationPayload":
        """Build a payload from an extracted (and possibly user-edited) record.

        Raises:
            pydantic.ValidationError: if company or position is empty.
        """
        return cls(
            company_name=record.company_name,
            position=record.position,
            location=record.location,
            department=record.department,
            notes=notes if notes is not None else f"Applied via {record.source or 'job board'}",
            job_url=record.url,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
