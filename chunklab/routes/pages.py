"""HTML page routes for the Chunk Lab UI."""

import os

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from chunklab.domain.chunking import describe_strategies
from chunklab.domain.samples import DEFAULT_SAMPLE, get_sample, list_samples

TEMPLATES_DIR = os.getenv(
    "CHUNKLAB_TEMPLATES_DIR",
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates"),
)

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=TEMPLATES_DIR)


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Render the chunking playground; results are fetched from the JSON API."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "strategies": describe_strategies(),
            "samples": list_samples(),
            "default_sample": DEFAULT_SAMPLE,
            "default_text": get_sample(DEFAULT_SAMPLE),
        },
    )
