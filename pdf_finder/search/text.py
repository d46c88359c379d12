"""
Purpose:
- Decode PDF bytes into plain text for substring matching (pypdf, no OCR).
"""

from __future__ import annotations
from io import BytesIO
from typing import List
from pypdf import PdfReader
from pypdf.errors import PyPdfError


def extract_text(data: bytes) -> str:
    """
    Return the text of every page joined by newlines.
    Raises ValueError when the bytes cannot be opened as a readable PDF.
    """
    try:
        reader = PdfReader(BytesIO(data))
        if reader.is_encrypted and not reader.decrypt(""):
            raise ValueError("document is password protected")
        pages = reader.pages
        n_pages = len(pages)
    except (PyPdfError, OSError, KeyError, TypeError) as e:
        raise ValueError(f"unreadable PDF: {e!r}") from e
    if n_pages == 0:
        raise ValueError("document has no pages")

    texts: List[str] = []
    for page in pages:
        try:
            texts.append(page.extract_text() or "")
        except Exception:
            # a single bad content stream should not hide the rest of the document
            texts.append("")
    return "\n".join(texts)


def matches(text: str, query: str) -> bool:
    """Case-sensitive containment; an empty query matches everything."""
    return query in text
