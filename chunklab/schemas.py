from __future__ import annotations

import os
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Requests carrying more text than this are rejected with a 422 before any
# chunking happens.
MAX_TEXT_CHARS = int(os.getenv("CHUNKLAB_MAX_TEXT_CHARS", "500000"))

StrategyName = Literal["characters", "sentences", "paragraphs", "semantic"]


# =============================================================================
# Core models (produced by the chunking strategies and the metrics engine)
# =============================================================================

class Chunk(BaseModel):
    """One slice of the source text, with offsets in source coordinates."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)   # exclusive

    @model_validator(mode="after")
    def _check_offsets(self) -> "Chunk":
        if self.end < self.start:
            raise ValueError(f"Chunk end ({self.end}) must not precede start ({self.start}).")
        return self


class SizeStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    avg_size: int = 0
    min_size: int = 0
    max_size: int = 0
    total_chars: int = 0


class ChunkingSummary(BaseModel):
    """Size statistics plus the IoU-inspired overlap efficiency score."""
    model_config = ConfigDict(frozen=True)

    metrics: SizeStatistics
    iou: int = 100


# ---------------- Strategy + sample descriptions ----------------

class StrategyInfo(BaseModel):
    name: StrategyName
    default_size: int
    supports_overlap: bool
    description: str


class SampleInfo(BaseModel):
    name: str
    title: str
    length: int


class SampleOut(SampleInfo):
    text: str


# ---------------- Chunking API ----------------

class ChunkingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    strategy: StrategyName = "characters"

    # None means "use the strategy default" (see STRATEGY_DEFAULTS).
    size: Optional[int] = Field(default=None, ge=1)
    overlap: int = Field(default=0, ge=0)


class ChunkingResult(BaseModel):
    strategy: StrategyName
    size: int
    overlap: int = 0
    text_length: int
    chunks: List[Chunk] = Field(default_factory=list)
    metrics: SizeStatistics
    iou: int


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: str = Field(default="", max_length=MAX_TEXT_CHARS)

    # Optional per-strategy size overrides, e.g. {"sentences": 150}.
    sizes: Dict[StrategyName, int] = Field(default_factory=dict)
    overlap: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_sizes(self) -> "CompareRequest":
        for name, size in self.sizes.items():
            if size < 1:
                raise ValueError(f"Size override for '{name}' must be >= 1.")
        return self


class CompareResponse(BaseModel):
    text_length: int
    results: List[ChunkingResult]


class MetricsRequest(BaseModel):
    chunks: List[Chunk] = Field(default_factory=list)
