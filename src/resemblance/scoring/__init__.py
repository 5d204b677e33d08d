"""Resemblance scoring of a text against a corpus."""

from .engine import (
    build_corpus,
    effective_n,
    evaluate,
    evaluate_shingle_sets,
)

__all__ = [
    "build_corpus",
    "effective_n",
    "evaluate",
    "evaluate_shingle_sets",
]
