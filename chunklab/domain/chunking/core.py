"""Core chunking primitives: unit scanning, parameter checks, and the four strategies."""

import logging
import re
from dataclasses import dataclass
from re import Pattern
from typing import List

from chunklab.schemas import Chunk

logger = logging.getLogger(__name__)

# Whitespace run following terminal punctuation; the punctuation stays with
# the sentence on its left.
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")

# One or more blank lines (a blank line may hold spaces or tabs).
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class TextUnit:
    """
    A trimmed sentence or paragraph located in the source text.

    Attributes:
        text: Unit content with surrounding whitespace removed.
        start: 0-based offset of the first non-whitespace character.
        end: Offset just past the last non-whitespace character.
    """

    text: str
    start: int
    end: int


def split_units(text: str, separator: Pattern[str]) -> List[TextUnit]:
    """
    Split text on `separator` and return the non-empty pieces with the
    offsets they actually occupy in `text`.

    Offsets come from the separator matches themselves, so separators of any
    width (``\\r\\n``, several blank lines, tabs) do not shift later units.
    """
    units: List[TextUnit] = []
    cursor = 0

    for match in separator.finditer(text):
        _append_unit(units, text, cursor, match.start())
        cursor = match.end()
    _append_unit(units, text, cursor, len(text))

    return units


def _append_unit(units: List[TextUnit], text: str, seg_start: int, seg_end: int) -> None:
    segment = text[seg_start:seg_end]
    stripped = segment.strip()
    if not stripped:
        return
    start = seg_start + (len(segment) - len(segment.lstrip()))
    units.append(TextUnit(text=stripped, start=start, end=start + len(stripped)))


def require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0. got={value}")


def validate_window(size: int, overlap: int) -> None:
    """Reject window parameters that would stall the fixed-width loop."""
    require_positive("size", size)
    if overlap < 0:
        raise ValueError(f"overlap must be >= 0. got={overlap}")
    if overlap >= size:
        raise ValueError(f"overlap must be smaller than size. got size={size}, overlap={overlap}")


def _slice_chunk(text: str, start: int, end: int) -> Chunk:
    return Chunk(text=text[start:end], start=start, end=end)


def rebase_chunks(chunks: List[Chunk], offset: int) -> List[Chunk]:
    """Shift chunk offsets by `offset` so they point into an enclosing text."""
    if not offset:
        return list(chunks)
    return [c.model_copy(update={"start": c.start + offset, "end": c.end + offset}) for c in chunks]


# ---------------- Strategies ----------------

def chunk_by_characters(text: str, size: int = 200, overlap: int = 0) -> List[Chunk]:
    """
    Fixed-width windows of `size` characters, each starting `size - overlap`
    characters after the previous one.

    The loop keeps stepping until the window start passes the end of the
    text, so an overlapping configuration ends with one or more shorter tail
    chunks. Every chunk is an exact slice of `text`.

    Raises:
        ValueError: if `size <= 0`, `overlap < 0` or `overlap >= size`.
    """
    validate_window(size, overlap)

    chunks: List[Chunk] = []
    step = size - overlap
    length = len(text)

    i = 0
    while i < length:
        chunks.append(_slice_chunk(text, i, min(i + size, length)))
        i += step

    logger.debug("Character chunker: %d chunk(s) (size=%d, overlap=%d)", len(chunks), size, overlap)
    return chunks


def chunk_by_sentences(text: str, max_size: int = 200) -> List[Chunk]:
    """
    Pack whole sentences into chunks of at most `max_size` characters.

    A sentence ends at `.`, `!` or `?` followed by whitespace. Sentences are
    added to the current chunk until the next one would push it past
    `max_size`; a sentence that is longer than `max_size` on its own is
    emitted as a single oversized chunk rather than being cut.

    The size of a chunk is measured as its sentences joined by single
    spaces, whatever whitespace separates them in the source. Chunk offsets
    span from the first character of the first sentence to the last
    character of the last sentence, and `text` is that exact slice.
    """
    require_positive("max_size", max_size)

    chunks: List[Chunk] = []
    start = end = -1
    joined_len = 0

    for unit in split_units(text, SENTENCE_BOUNDARY):
        if start < 0:
            start = unit.start
            joined_len = len(unit.text)
        elif joined_len + 1 + len(unit.text) > max_size:
            chunks.append(_slice_chunk(text, start, end))
            start = unit.start
            joined_len = len(unit.text)
        else:
            joined_len += 1 + len(unit.text)
        end = unit.end

    if start >= 0:
        chunks.append(_slice_chunk(text, start, end))

    logger.debug("Sentence chunker: %d chunk(s) (max_size=%d)", len(chunks), max_size)
    return chunks


def chunk_by_paragraphs(text: str, max_size: int = 400) -> List[Chunk]:
    """
    One chunk per blank-line separated paragraph, falling back to sentence
    chunking for paragraphs longer than `max_size`.

    Sub-chunks from the fallback are re-based onto the paragraph's offset so
    every chunk stays in source-text coordinates.
    """
    require_positive("max_size", max_size)

    chunks: List[Chunk] = []
    for para in split_units(text, PARAGRAPH_BREAK):
        if len(para.text) > max_size:
            chunks.extend(rebase_chunks(chunk_by_sentences(para.text, max_size), para.start))
        else:
            chunks.append(Chunk(text=para.text, start=para.start, end=para.end))

    logger.debug("Paragraph chunker: %d chunk(s) (max_size=%d)", len(chunks), max_size)
    return chunks


def chunk_semantic(text: str, max_size: int = 300) -> List[Chunk]:
    """
    Semantic chunking placeholder: paragraph boundaries stand in for topic
    boundaries.

    Output is identical to `chunk_by_paragraphs(text, max_size)`. An
    embedding-similarity boundary detector would replace this body.
    """
    return chunk_by_paragraphs(text, max_size)
