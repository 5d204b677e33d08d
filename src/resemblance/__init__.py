"""Shingle-based text resemblance with cluster-derived thresholds."""

from resemblance.config.settings import EvaluationMethod, ShingleOptions
from resemblance.shingles import ShingleSet, build_shingle_set
from resemblance.scoring import build_corpus, evaluate
from resemblance.clustering import ResultsClusterer, clustered_results_over_r_threshold

__version__ = "0.1.0"

__all__ = [
    "EvaluationMethod",
    "ShingleOptions",
    "ShingleSet",
    "build_shingle_set",
    "build_corpus",
    "evaluate",
    "ResultsClusterer",
    "clustered_results_over_r_threshold",
]
