"""
Domain layer containing the chunking strategies, chunk metrics, and samples.

This package is intentionally free of web framework dependencies so it can be
reused by other interfaces or projects.
"""

from . import chunking, metrics, samples

__all__ = [
    "chunking",
    "metrics",
    "samples",
]
