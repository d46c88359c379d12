"""
Purpose:
- The "service" orchestrates query -> source page -> links -> fetch -> text -> match -> render.
- Documents are processed one at a time; a failure on one document only skips that document.
- Source URL, suffix and scale are constructor arguments so tests can run against fakes.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Optional
import httpx
from fastapi.concurrency import run_in_threadpool
from ..core.settings import settings
from ..render.pages import render_first_page
from .errors import (
    DocumentDecodeError,
    DocumentError,
    DocumentRenderError,
    NoDocumentsFoundError,
    NoMatchesError,
)
from .fetcher import build_client, fetch_document, fetch_source_page
from .links import extract_pdf_links
from .schema import RenderedImage, SearchOutcome
from .text import extract_text, matches

logger = logging.getLogger(__name__)

TextExtractor = Callable[[bytes], str]
Rasterizer = Callable[[bytes, float], bytes]


class SearchPipeline:
    def __init__(
        self,
        client: httpx.AsyncClient,
        source_url: str,
        suffix: str,
        scale: float,
        text_extractor: TextExtractor = extract_text,
        rasterizer: Rasterizer = render_first_page,
    ) -> None:
        self.client = client
        self.source_url = source_url
        self.suffix = suffix
        self.scale = scale
        self.text_extractor = text_extractor
        self.rasterizer = rasterizer

    async def run(self, query: str) -> SearchOutcome:
        """
        Raises SourceUnavailableError, NoDocumentsFoundError or NoMatchesError;
        per-document failures are logged and skipped.
        """
        html = await fetch_source_page(self.client, self.source_url, query)
        links = extract_pdf_links(html, self.source_url, self.suffix)
        if not links:
            raise NoDocumentsFoundError(self.source_url)
        logger.info("Found %d candidate documents on %s", len(links), self.source_url)

        images: List[RenderedImage] = []
        skipped = 0
        for url in links:
            try:
                rendered = await self._process(url, query)
            except DocumentError as e:
                skipped += 1
                logger.warning("Skipping %s: %s", e.url, e.reason)
                continue
            if rendered is not None:
                images.append(rendered)

        logger.info(
            "Query %r: %d matched, %d skipped, %d candidates",
            query, len(images), skipped, len(links),
        )
        if not images:
            raise NoMatchesError(query)
        return SearchOutcome(images=images, candidates=len(links), skipped=skipped)

    async def _process(self, url: str, query: str) -> Optional[RenderedImage]:
        """Return the rendered first page, or None when the text does not match."""
        doc = await fetch_document(self.client, url)

        try:
            text = await run_in_threadpool(self.text_extractor, doc.data)
        except Exception as e:
            raise DocumentDecodeError(url, f"text extraction failed: {e}") from e
        if not matches(text, query):
            return None

        try:
            png = await run_in_threadpool(self.rasterizer, doc.data, self.scale)
        except Exception as e:
            raise DocumentRenderError(url, f"render failed: {e}") from e
        return RenderedImage(source_url=url, data=png)


async def search_service(query: str) -> SearchOutcome:
    """Run one search with a fresh HTTP client and the configured constants."""
    async with build_client() as client:
        pipeline = SearchPipeline(
            client,
            source_url=settings.source_url,
            suffix=settings.document_suffix,
            scale=settings.render_scale,
        )
        return await pipeline.run(query)
