"""
Purpose:
- Render page 1 of an in-memory PDF to PNG bytes.
- Output is deterministic: the same bytes and scale always give the same PNG.

System requirements:
- poppler-utils installed (pdftoppm/pdfinfo callable)
"""

from __future__ import annotations
from contextlib import contextmanager
from io import BytesIO
from typing import Iterator, List
from PIL import Image
from pdf2image import convert_from_bytes  # uses poppler's pdftoppm under the hood
from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError

# PDF user space is 72 units per inch, so scale 1.0 means native page size
PDF_POINTS_PER_INCH = 72


class RenderError(Exception):
    pass


def dpi_for_scale(scale: float) -> int:
    return round(PDF_POINTS_PER_INCH * scale)


@contextmanager
def _surface(images: List[Image.Image]) -> Iterator[Image.Image]:
    """Yield the page-1 surface and release every decoded surface on exit, success or not."""
    try:
        if not images:
            raise RenderError("document has no pages")
        yield images[0]
    finally:
        for img in images:
            img.close()
        images.clear()


def render_first_page(data: bytes, scale: float = 1.5) -> bytes:
    """Rasterize the first page at `scale` x native size and encode it as PNG."""
    try:
        decoded = convert_from_bytes(
            data,
            dpi=dpi_for_scale(scale),
            first_page=1,
            last_page=1,
            fmt="png",
        )
    except (PDFPageCountError, PDFSyntaxError) as e:
        raise RenderError(f"cannot decode document: {e}") from e
    except PDFInfoNotInstalledError as e:
        raise RenderError("poppler is not installed") from e

    with _surface(decoded) as page:
        buf = BytesIO()
        page.save(buf, format="PNG")
        return buf.getvalue()
