"""
Purpose:
- Expose POST /api/search: query in, base64 PNGs of matching first pages out.
- Maps pipeline outcomes onto the HTTP envelope (200 / 404 / 500).
"""

import logging
from typing import Awaitable, Callable
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from ..search.errors import NoDocumentsFoundError, NoMatchesError, SourceUnavailableError
from ..search.schema import ErrorResponse, SearchOutcome, SearchQuery, SearchResponse
from ..search.service import search_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])

SearchRunner = Callable[[str], Awaitable[SearchOutcome]]

NO_DOCUMENTS_MESSAGE = "no documents discovered"
NO_MATCHES_MESSAGE = "no documents matched the query"
FAILURE_MESSAGE = "search failed"


def get_search_runner() -> SearchRunner:
    return search_service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(payload: SearchQuery, run: SearchRunner = Depends(get_search_runner)):
    try:
        outcome = await run(payload.query)
    except NoDocumentsFoundError:
        return _error(404, NO_DOCUMENTS_MESSAGE)
    except NoMatchesError:
        return _error(404, NO_MATCHES_MESSAGE)
    except SourceUnavailableError:
        logger.exception("Source page unavailable")
        return _error(500, FAILURE_MESSAGE)
    except Exception:
        logger.exception("Unexpected error while searching for %r", payload.query)
        return _error(500, FAILURE_MESSAGE)
    return outcome.to_response()
