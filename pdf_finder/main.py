"""
Purpose:
- FastAPI application factory and router mounts.
- Adds CORS for the browser frontend.
- `main()` serves the app with Uvicorn on settings.host:settings.port.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .core.settings import settings
from .api.health import router as health_router
from .api.search import router as search_router


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are a caller error, reported in the same envelope as other failures
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    detail = first.get("msg", "invalid request")
    return JSONResponse(
        status_code=400,
        content={"message": f"{where}: {detail}" if where else detail},
    )


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="PDF Finder API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _bad_request)
    app.include_router(health_router)
    app.include_router(search_router)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("pdf_finder.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
