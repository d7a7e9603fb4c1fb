"""Job capture package.

Turns a job posting page into a structured `JobRecord`:
- `sites.py` holds the per-site selector tables and URL classification.
- `resolve.py` evaluates selector candidates and the generic fallback cascade.
- `normalize.py` cleans text and infers the department.
- `extractor.py` composes the above into a single `extract(url, document)`.
- `client.py` saves a reviewed record to the tracker server.
"""

from .documents import PageDocument, SoupDocument
from .extractor import Extractor, extract
from .models import ApplicationPayload, JobRecord, SiteId, SiteRule

__all__ = [
    "ApplicationPayload",
    "Extractor",
    "JobRecord",
    "PageDocument",
    "SiteId",
    "SiteRule",
    "SoupDocument",
    "extract",
]
