"""Core domain models."""

from .models import (
    ScoredEntry,
    Evaluation,
    ProfileMatch,
    ProfileReport,
)

__all__ = [
    "ScoredEntry",
    "Evaluation",
    "ProfileMatch",
    "ProfileReport",
]
