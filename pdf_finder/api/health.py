# Common language: Environment/ops probe that surfaces version pins and the effective search config.
# Use this before/after upgrades to confirm no silent drift.

from fastapi import APIRouter
from ..core.settings import settings
import importlib
import shutil
import sys

router = APIRouter(tags=["health"])


def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except Exception:
        return "not-installed"


@router.get("/healthz")
def healthz():
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "httpx": _ver("httpx"),
            "selectolax": _ver("selectolax"),
            "pypdf": _ver("pypdf"),
            "pdf2image": _ver("pdf2image"),
            "PIL": _ver("PIL"),
        },
        # pdf2image shells out to poppler; renders fail without it
        "poppler": shutil.which("pdftoppm") is not None,
        "search_config": {
            "source_url": settings.source_url,
            "document_suffix": settings.document_suffix,
            "render_scale": settings.render_scale,
            "http_timeout": settings.http_timeout,
        },
    }
