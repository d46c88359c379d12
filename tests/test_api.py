"""
API contract tests: the search runner is replaced through FastAPI dependency
overrides so no network or rendering happens.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from pdf_finder.api.search import get_search_runner
from pdf_finder.main import create_app
from pdf_finder.search.errors import NoDocumentsFoundError, NoMatchesError, SourceUnavailableError
from pdf_finder.search.schema import RenderedImage, SearchOutcome


def make_client(runner) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_search_runner] = lambda: runner
    return TestClient(app)


def raising(exc: Exception):
    async def runner(query: str) -> SearchOutcome:
        raise exc
    return runner


def test_matches_are_returned_as_base64_in_order():
    seen = []

    async def runner(query: str) -> SearchOutcome:
        seen.append(query)
        return SearchOutcome(images=[
            RenderedImage(source_url="https://ex.com/a.pdf", data=b"\x89PNG-a"),
            RenderedImage(source_url="https://ex.com/c.pdf", data=b"\x89PNG-c"),
        ], candidates=3)

    resp = make_client(runner).post("/api/search", json={"query": "report"})
    assert resp.status_code == 200
    images = resp.json()["images"]
    assert [base64.b64decode(i) for i in images] == [b"\x89PNG-a", b"\x89PNG-c"]
    assert seen == ["report"]


@pytest.mark.parametrize("exc,message", [
    (NoDocumentsFoundError("https://ex.com/"), "no documents discovered"),
    (NoMatchesError("report"), "no documents matched the query"),
])
def test_empty_outcomes_are_404(exc, message):
    resp = make_client(raising(exc)).post("/api/search", json={"query": "report"})
    assert resp.status_code == 404
    assert resp.json() == {"message": message}


@pytest.mark.parametrize("exc", [
    SourceUnavailableError("https://ex.com/: ConnectError"),
    RuntimeError("boom"),
])
def test_fatal_failures_are_500(exc):
    resp = make_client(raising(exc)).post("/api/search", json={"query": "report"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "search failed"}


def test_missing_query_is_400():
    resp = make_client(raising(AssertionError("not called"))).post("/api/search", json={})
    assert resp.status_code == 400
    assert "query" in resp.json()["message"]


def test_malformed_body_is_400():
    resp = make_client(raising(AssertionError("not called"))).post(
        "/api/search", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400


def test_empty_query_is_accepted():
    async def runner(query: str) -> SearchOutcome:
        assert query == ""
        return SearchOutcome(images=[RenderedImage(source_url="https://ex.com/a.pdf", data=b"x")])

    resp = make_client(runner).post("/api/search", json={"query": ""})
    assert resp.status_code == 200
    assert resp.json() == {"images": [base64.b64encode(b"x").decode()]}


def test_healthz_reports_search_config():
    resp = TestClient(create_app()).get("/healthz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["search_config"]["document_suffix"] == ".pdf"
    assert body["search_config"]["render_scale"] == 1.5
