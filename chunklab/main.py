"""FastAPI app wiring for Chunk Lab.

This module owns the public ASGI `app` instance and the router wiring.
"""

import logging
import os

from fastapi import FastAPI

from chunklab.routes.api import router as api_router
from chunklab.routes.pages import router as pages_router

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(title="Chunk Lab: text chunking playground")


def create_application() -> FastAPI:
    """Return the configured FastAPI app for external servers/importers."""
    return app

# Pages + API
app.include_router(pages_router)
app.include_router(api_router)
