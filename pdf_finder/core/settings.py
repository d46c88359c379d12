"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps the upstream source page, bind address and HTTP knobs tunable without code changes.
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_URL = "https://pdl-1-pdf-html.vercel.app/"
DOCUMENT_SUFFIX = ".pdf"
# 1.5x native page size keeps text legible without bloating the base64 payload
RENDER_SCALE = 1.5


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=5000, description="Port for FastAPI/Uvicorn")

    # CORS (the browser frontend runs on :3000)
    cors_allow_origins: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Allowed origins for browser apps"
    )

    # --- Search config ---
    source_url: str = Field(
        default=DEFAULT_SOURCE_URL,
        description="Page scraped for document links; the query is forwarded as ?q="
    )
    document_suffix: str = Field(default=DOCUMENT_SUFFIX, description="Path suffix of candidate links")
    render_scale: float = Field(default=RENDER_SCALE, gt=0, description="Magnification for page 1 renders")

    # Outbound HTTP
    http_timeout: float = Field(default=20.0, gt=0, description="Per-request timeout (seconds)")
    user_agent: str = Field(default="pdf-finder/0.1", description="User-Agent sent upstream")

    log_level: str = Field(default="INFO")


settings = Settings()
