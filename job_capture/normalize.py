"""Post-processing for extracted records.

Two deterministic steps run on every record before it leaves the engine:
- whitespace normalization of every string field
- department inference from the position title

Keeping both here makes `post_process` idempotent and easy to test in isolation.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .models import JobRecord


WHITESPACE_RE = re.compile(r"\s+")

# Checked in this order; the first hit wins, not the best one.
DEPARTMENT_PATTERNS: List[Tuple[str, str]] = [
    (r"engineer", "Engineering"),
    (r"marketing", "Marketing"),
    (r"sales", "Sales"),
    (r"product", "Product"),
    (r"design", "Design"),
    (r"operations", "Operations"),
    (r"finance", "Finance"),
    (r"legal", "Legal"),
    (r"hr", "HR"),
    (r"data", "Data"),
    (r"security", "Security"),
]

TEXT_FIELDS = ("source", "company_name", "position", "location", "department", "url")


def clean_text(text: str) -> str:
    """Collapse runs of whitespace (newlines and tabs included) and trim."""
    return WHITESPACE_RE.sub(" ", text or "").strip()


def infer_department(position: str) -> str:
    """Infer a department from the position title, or return an empty string."""
    t = (position or "").lower()
    for pat, label in DEPARTMENT_PATTERNS:
        if re.search(pat, t):
            return label
    return ""


def post_process(record: JobRecord) -> JobRecord:
    """Return a normalized copy of `record` with a department filled in when possible."""
    update = {name: clean_text(getattr(record, name)) for name in TEXT_FIELDS}
    if update["position"] and not update["department"]:
        update["department"] = infer_department(update["position"])
    return record.model_copy(update=update)
