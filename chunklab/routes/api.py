"""Public JSON API routes for Chunk Lab.

These handlers translate HTTP requests into domain-layer calls and return
validated responses for the UI and API consumers. Keep the logic thin and
delegate to domain modules for chunking and metrics.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from chunklab.domain.chunking import STRATEGY_NAMES, describe_strategies, run_strategy, validate_parameters
from chunklab.domain.metrics import summarize_chunks
from chunklab.domain.samples import SAMPLE_TITLES, get_sample, list_samples
from chunklab.schemas import (
    MAX_TEXT_CHARS,
    ChunkingRequest,
    ChunkingResult,
    ChunkingSummary,
    CompareRequest,
    CompareResponse,
    MetricsRequest,
    SampleInfo,
    SampleOut,
    StrategyInfo,
)
from chunklab.text_input import describe_upload, extract_text_from_bytes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


# ---------------- Helpers ----------------

def _check_parameters(strategy: str, size: Optional[int], overlap: int) -> int:
    """Validate strategy parameters, turning domain ValueErrors into 400s."""
    try:
        return validate_parameters(strategy, size, overlap)
    except ValueError as exc:
        logger.warning("Chunking rejected (strategy=%s, size=%s, overlap=%s): %s", strategy, size, overlap, exc)
        raise HTTPException(status_code=400, detail=str(exc))


def _chunk_and_measure(strategy: str, text: str, size: Optional[int], overlap: int) -> ChunkingResult:
    """Run one strategy and attach both metrics; invalid parameters become 400s."""
    resolved = _check_parameters(strategy, size, overlap)
    chunks = run_strategy(strategy, text, resolved, overlap)

    summary = summarize_chunks(chunks)
    logger.info(
        "Chunking: strategy=%s size=%d overlap=%d text_length=%d -> %d chunk(s), iou=%d",
        strategy,
        resolved,
        overlap,
        len(text),
        len(chunks),
        summary.iou,
    )
    return ChunkingResult(
        strategy=strategy,
        size=resolved,
        overlap=overlap,
        text_length=len(text),
        chunks=chunks,
        metrics=summary.metrics,
        iou=summary.iou,
    )


def _coerce_int(value: Optional[str]) -> Optional[int]:
    """Convert optional form values to integers, returning None when blank."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Expected an integer, got '{value}'.")


# ---------------- Strategies + samples ----------------

@router.get("/strategies", response_model=List[StrategyInfo])
def strategies_list():
    """List the available chunking strategies with their default sizes."""
    return describe_strategies()


@router.get("/samples", response_model=List[SampleInfo])
def samples_list():
    """List bundled sample documents."""
    return list_samples()


@router.get("/samples/{name}", response_model=SampleOut)
def samples_get(name: str):
    """Return a bundled sample's text, or 404 when the name is unknown."""
    try:
        text = get_sample(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Sample not found")
    return SampleOut(name=name, title=SAMPLE_TITLES[name], length=len(text), text=text)


# ---------------- Chunking ----------------

@router.post("/chunking/preview", response_model=ChunkingResult)
def chunking_preview(payload: ChunkingRequest):
    """Chunk the provided text with one strategy and report metrics."""
    return _chunk_and_measure(payload.strategy, payload.text, payload.size, payload.overlap)


@router.post("/chunking/compare", response_model=CompareResponse)
def chunking_compare(payload: CompareRequest):
    """Run every strategy over the same text; overlap only applies to `characters`."""
    results = [
        _chunk_and_measure(
            name,
            payload.text,
            payload.sizes.get(name),
            payload.overlap if name == "characters" else 0,
        )
        for name in STRATEGY_NAMES
    ]
    return CompareResponse(text_length=len(payload.text), results=results)


@router.post("/chunking/upload")
async def chunking_upload(
    files: List[UploadFile] = File(...),
    strategy: str = Form(default="characters"),
    size: Optional[str] = Form(default=None),
    overlap: Optional[str] = Form(default=None),
):
    """Chunk one or more uploaded text files in memory; nothing is written to disk."""
    if not files:
        raise HTTPException(status_code=400, detail="At least one file is required.")
    overlap_value = _coerce_int(overlap) or 0
    size_value = _check_parameters(strategy, _coerce_int(size), overlap_value)

    results: List[Dict[str, Any]] = []
    for f in files:
        data = await f.read()
        size_bytes = len(data)
        text = extract_text_from_bytes(data)

        if not text.strip():
            results.append({
                "file": describe_upload(f, size_bytes),
                "error": "File is empty or unreadable",
            })
            continue
        if len(text) > MAX_TEXT_CHARS:
            results.append({
                "file": describe_upload(f, size_bytes),
                "error": f"File exceeds {MAX_TEXT_CHARS} characters",
            })
            continue

        result = _chunk_and_measure(strategy, text, size_value, overlap_value)
        results.append({
            "file": describe_upload(f, size_bytes),
            "result": result.model_dump(mode="json"),
        })

    return {"ok": True, "strategy": strategy, "files": results}


# ---------------- Metrics ----------------

@router.post("/metrics", response_model=ChunkingSummary)
def metrics_calculate(payload: MetricsRequest):
    """Compute size statistics and the overlap efficiency score for given chunks."""
    return summarize_chunks(payload.chunks)
