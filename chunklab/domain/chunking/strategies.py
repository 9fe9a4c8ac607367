"""Closed registry of the chunking strategies a caller can select by name."""

from typing import Callable, Dict, List, Optional, get_args

from chunklab.domain.chunking.core import (
    chunk_by_characters,
    chunk_by_paragraphs,
    chunk_by_sentences,
    chunk_semantic,
    require_positive,
    validate_window,
)
from chunklab.schemas import Chunk, StrategyInfo, StrategyName

STRATEGY_NAMES: tuple[str, ...] = get_args(StrategyName)

STRATEGY_DEFAULTS: Dict[str, int] = {
    "characters": 200,
    "sentences": 200,
    "paragraphs": 400,
    "semantic": 300,
}

_DESCRIPTIONS: Dict[str, str] = {
    "characters": "Fixed-width character windows with optional overlap.",
    "sentences": "Whole sentences packed up to the size limit.",
    "paragraphs": "Blank-line paragraphs; long paragraphs fall back to sentences.",
    "semantic": "Paragraph boundaries as a stand-in for semantic boundaries.",
}

_SIZED_STRATEGIES: Dict[str, Callable[[str, int], List[Chunk]]] = {
    "sentences": chunk_by_sentences,
    "paragraphs": chunk_by_paragraphs,
    "semantic": chunk_semantic,
}


def resolve_size(name: str, size: Optional[int]) -> int:
    if name not in STRATEGY_DEFAULTS:
        raise ValueError(f"Unknown chunking strategy '{name}'. Expected one of: {', '.join(STRATEGY_NAMES)}.")
    return STRATEGY_DEFAULTS[name] if size is None else size


def validate_parameters(name: str, size: Optional[int] = None, overlap: int = 0) -> int:
    """
    Check a strategy name and its parameters without chunking anything.

    Returns the resolved size. Raises ValueError on the same inputs that
    `run_strategy` rejects.
    """
    resolved = resolve_size(name, size)
    if name == "characters":
        validate_window(resolved, overlap)
        return resolved

    require_positive("max_size", resolved)
    if overlap:
        raise ValueError(f"Strategy '{name}' does not support overlap. got overlap={overlap}")
    return resolved


def run_strategy(name: str, text: str, size: Optional[int] = None, overlap: int = 0) -> List[Chunk]:
    """
    Run the named strategy over `text`.

    Args:
        name: One of `STRATEGY_NAMES`.
        text: Source text to chunk.
        size: Window size (`characters`) or maximum chunk size (the others);
            `None` selects the strategy default.
        overlap: Character overlap; only `characters` accepts a non-zero value.

    Raises:
        ValueError: for an unknown name or invalid parameters.
    """
    resolved = validate_parameters(name, size, overlap)
    if name == "characters":
        return chunk_by_characters(text, resolved, overlap)
    return _SIZED_STRATEGIES[name](text, resolved)


def describe_strategies() -> List[StrategyInfo]:
    return [
        StrategyInfo(
            name=name,
            default_size=STRATEGY_DEFAULTS[name],
            supports_overlap=name == "characters",
            description=_DESCRIPTIONS[name],
        )
        for name in STRATEGY_NAMES
    ]
