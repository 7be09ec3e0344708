"""Loading of page definitions and documents from disk."""

from .files import read_document, read_mapping
from .page import load_page, page_from_dict

__all__ = [
    "read_document",
    "read_mapping",
    "load_page",
    "page_from_dict",
]
