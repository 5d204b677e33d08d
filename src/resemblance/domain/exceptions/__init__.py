"""Custom exceptions for the resemblance package."""

# Base exceptions
from .base import (
    ResemblanceError,
    ConfigurationError,
    CorpusLoadError,
)

# Validation exceptions
from .validation import (
    ValidationError,
    InvalidArgumentError,
)

# Comparison exceptions
from .comparison import (
    ComparisonError,
    DegenerateComparisonError,
    ClusteringError,
)

__all__ = [
    # Base
    "ResemblanceError",
    "ConfigurationError",
    "CorpusLoadError",

    # Validation
    "ValidationError",
    "InvalidArgumentError",

    # Comparison
    "ComparisonError",
    "DegenerateComparisonError",
    "ClusteringError",
]
