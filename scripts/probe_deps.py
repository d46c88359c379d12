"""
Purpose:
- Sanity-check critical library versions after upgrades.
- Import the exact modules we use and print versions so we can spot drift immediately.
"""

import shutil
import sys
import fastapi
import httpx
import pdf2image
import PIL
import pypdf
import selectolax
import uvicorn
from pydantic_settings import BaseSettings

print("python", sys.version)
print("fastapi", fastapi.__version__)
print("uvicorn", uvicorn.__version__)
print("httpx", httpx.__version__)
print("selectolax", getattr(selectolax, "__version__", "unknown"))
print("pypdf", pypdf.__version__)
print("pdf2image", getattr(pdf2image, "__version__", "unknown"))
print("pillow", PIL.__version__)
print("pydantic-settings", BaseSettings.__module__.split(".")[0])  # presence check
# pdf2image is only a wrapper; the renderer itself is poppler
print("pdftoppm", shutil.which("pdftoppm") or "MISSING")
print("OK")
