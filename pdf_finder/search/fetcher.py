"""
Purpose:
- Fetch the source page and candidate documents over HTTP.
- One attempt per URL; failures are translated into the pipeline's error taxonomy.
"""

from __future__ import annotations
import httpx
from ..core.settings import settings
from .errors import DocumentFetchError, SourceUnavailableError
from .schema import FetchedDocument


def build_client() -> httpx.AsyncClient:
    """Per-request client; nothing is pooled or cached across requests."""
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


async def fetch_source_page(client: httpx.AsyncClient, url: str, query: str) -> str:
    """GET the source page with the query forwarded as ?q=; any failure is fatal."""
    try:
        resp = await client.get(url, params={"q": query})
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise SourceUnavailableError(f"{url}: {e!r}") from e
    return resp.text


async def fetch_document(client: httpx.AsyncClient, url: str) -> FetchedDocument:
    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        # InvalidURL and IDNA errors come from URLs httpx cannot encode
        raise DocumentFetchError(url, f"fetch failed: {e!r}") from e
    return FetchedDocument(url=url, data=resp.content)
