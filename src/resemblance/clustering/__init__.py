"""Cluster scored results and threshold them by cohort."""

from .kmeans import ClusterAssignment, KMeansScoreClusterer, ScoreClusterer
from .results import (
    ResultsClusterer,
    clustered_results_over_r_threshold,
    DEFAULT_CLUSTER_COUNT,
)

__all__ = [
    "ClusterAssignment",
    "KMeansScoreClusterer",
    "ScoreClusterer",
    "ResultsClusterer",
    "clustered_results_over_r_threshold",
    "DEFAULT_CLUSTER_COUNT",
]
