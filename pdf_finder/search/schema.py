"""
Purpose:
- Pydantic models for search in/out so the API is self-documenting and stable.
- Plain dataclasses for the per-request values passed between pipeline stages.
"""

from __future__ import annotations
import base64
from dataclasses import dataclass, field
from typing import List
from pydantic import BaseModel, Field


class SearchQuery(BaseModel):
    # An empty string is allowed and matches every document with text
    query: str = Field(..., description="Text that must appear in a document")


class SearchResponse(BaseModel):
    images: List[str] = Field(default_factory=list, description="Base64 PNGs of matching first pages")


class ErrorResponse(BaseModel):
    message: str


@dataclass(frozen=True)
class FetchedDocument:
    url: str
    data: bytes


@dataclass(frozen=True)
class RenderedImage:
    source_url: str
    data: bytes  # PNG

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


@dataclass(frozen=True)
class SearchOutcome:
    images: List[RenderedImage] = field(default_factory=list)
    candidates: int = 0
    skipped: int = 0

    def to_response(self) -> SearchResponse:
        return SearchResponse(images=[img.to_base64() for img in self.images])
