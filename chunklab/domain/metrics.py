"""Quality metrics over a chunk list, independent of the strategy that produced it."""

import math
from typing import Optional, Sequence

from chunklab.schemas import Chunk, ChunkingSummary, SizeStatistics


def _round_half_up(value: float) -> int:
    # round() would use banker's rounding (round(2.5) == 2).
    return int(math.floor(value + 0.5))


def calculate_metrics(chunks: Optional[Sequence[Chunk]]) -> SizeStatistics:
    """Count and size distribution of chunk texts; all zeros for no chunks."""
    if not chunks:
        return SizeStatistics()

    sizes = [len(c.text) for c in chunks]
    total = sum(sizes)
    return SizeStatistics(
        count=len(chunks),
        avg_size=_round_half_up(total / len(sizes)),
        min_size=min(sizes),
        max_size=max(sizes),
        total_chars=total,
    )


def calculate_iou(chunks: Optional[Sequence[Chunk]]) -> int:
    """
    IoU-inspired overlap efficiency score.

    Sums the overlap between each chunk and its predecessor and reports the
    non-overlapping share of the total chunk text volume as a percentage.
    The total double counts overlapping regions, so this is a ratio against
    raw content volume rather than a geometric union. 100 means no overlap;
    fewer than two chunks, or chunks with no text, also score 100.
    """
    if not chunks or len(chunks) < 2:
        return 100

    total_overlap = 0
    for prev, curr in zip(chunks, chunks[1:]):
        if curr.start < prev.end:
            total_overlap += prev.end - curr.start

    total_size = sum(len(c.text) for c in chunks)
    if total_size == 0:
        return 100
    return _round_half_up((total_size - total_overlap) / total_size * 100)


def summarize_chunks(chunks: Optional[Sequence[Chunk]]) -> ChunkingSummary:
    return ChunkingSummary(metrics=calculate_metrics(chunks), iou=calculate_iou(chunks))
