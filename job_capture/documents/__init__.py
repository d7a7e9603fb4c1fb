from .base import PageDocument
from .soup import SoupDocument, fetch_document

__all__ = ["PageDocument", "SoupDocument", "fetch_document"]
