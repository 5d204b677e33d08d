"""Scoring and clustering exceptions."""

from typing import Optional
from .base import ResemblanceError

class ComparisonError(ResemblanceError):
    """Base class for errors raised while scoring texts."""

    def __init__(self, message: str, *, n: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        if n is not None:
            self.add_context('n', n)


class DegenerateComparisonError(ComparisonError):
    """Raised in strict mode when both shingle sets are empty."""

    def __init__(self, message: str = "Cannot compute resemblance of two empty shingle sets", **kwargs):
        super().__init__(message, **kwargs)
        self.add_suggestion("Check that neither text is empty after character removal")

    def _get_default_error_code(self) -> str:
        return "DEGENERATE_COMPARISON"


class ClusteringError(ResemblanceError):
    """Raised when scored results cannot be clustered."""

    def __init__(
        self,
        message: str,
        *,
        cluster_count: Optional[int] = None,
        n_points: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if cluster_count is not None:
            self.add_context('cluster_count', cluster_count)
        if n_points is not None:
            self.add_context('n_points', n_points)

    def _get_default_error_code(self) -> str:
        return "CLUSTERING_FAILED"
