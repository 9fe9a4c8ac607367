"""
Chunking strategies that operate independently of any web interface.
"""

from .core import (
    chunk_by_characters,
    chunk_by_paragraphs,
    chunk_by_sentences,
    chunk_semantic,
    rebase_chunks,
    split_units,
)
from .strategies import (
    STRATEGY_DEFAULTS,
    STRATEGY_NAMES,
    describe_strategies,
    resolve_size,
    run_strategy,
    validate_parameters,
)

__all__ = [
    "STRATEGY_DEFAULTS",
    "STRATEGY_NAMES",
    "chunk_by_characters",
    "chunk_by_paragraphs",
    "chunk_by_sentences",
    "chunk_semantic",
    "describe_strategies",
    "rebase_chunks",
    "resolve_size",
    "run_strategy",
    "split_units",
    "validate_parameters",
]
