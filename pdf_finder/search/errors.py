"""
Purpose:
- Exception taxonomy for the search pipeline.
- Request-level errors propagate to the API layer; DocumentError subclasses
  only ever skip a single candidate inside the pipeline loop.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for everything the pipeline raises on purpose."""


class SourceUnavailableError(SearchError):
    """The source page could not be fetched; there is nothing to iterate over."""


class NoDocumentsFoundError(SearchError):
    """The source page links to no candidate documents."""


class NoMatchesError(SearchError):
    """Every candidate was skipped or did not contain the query."""


class DocumentError(SearchError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class DocumentFetchError(DocumentError):
    pass


class DocumentDecodeError(DocumentError):
    pass


class DocumentRenderError(DocumentError):
    pass
