"""Base class for queryable page documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class PageDocument(ABC):
    """Read-only view of a loaded page that extraction rules query against."""

    @abstractmethod
    def query_first_text(self, selector: str) -> Optional[str]:
        """Text content of the first element matching `selector`, or None."""
        raise NotImplementedError

    @abstractmethod
    def query_meta(self, name: str) -> Optional[str]:
        """Content of the `<meta>` tag with this property or name, or None."""
        raise NotImplementedError

    @abstractmethod
    def title(self) -> str:
        """The document title, empty when the page has none."""
        raise NotImplementedError
