"""Corpus input."""

from .corpus import load_corpus, parse_corpus

__all__ = ["load_corpus", "parse_corpus"]
