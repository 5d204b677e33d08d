"""Shingle construction."""

from .shingle_set import (
    ShingleSet,
    build_shingle_set,
    generate_shingles,
    tokenize,
    PAD_TOKEN,
)

__all__ = [
    "ShingleSet",
    "build_shingle_set",
    "generate_shingles",
    "tokenize",
    "PAD_TOKEN",
]
