from __future__ import annotations

from typing import Optional

import pytest

from job_capture.documents import PageDocument, SoupDocument


def page(body: str = "", head: str = "") -> SoupDocument:
    return SoupDocument(f"<html><head>{head}</head><body>{body}</body></html>")


class BrokenDocument(PageDocument):
    """A document whose every lookup fails, like a detached frame."""

    def query_first_text(self, selector: str) -> Optional[str]:
        raise RuntimeError("document is gone")

    def query_meta(self, name: str) -> Optional[str]:
        raise RuntimeError("document is gone")

    def title(self) -> str:
        raise RuntimeError("document is gone")


@pytest.fixture
def broken_document() -> BrokenDocument:
    return BrokenDocument()
