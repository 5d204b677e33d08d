"""Clustering capability: partition scalar scores into groups with centroids."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

import numpy as np
from sklearn.cluster import KMeans

from resemblance.domain.exceptions import ClusteringError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusterAssignment:
    """Cluster label per input score plus one centroid score per cluster."""
    labels: List[int] = field(default_factory=list)
    centroids: List[float] = field(default_factory=list)

    @property
    def cluster_count(self) -> int:
        return len(self.centroids)

    def nearest(self, score: float) -> int:
        """Index of the centroid closest to ``score``."""
        if not self.centroids:
            raise ClusteringError("No clusters available", n_points=len(self.labels))
        return min(range(len(self.centroids)), key=lambda i: abs(self.centroids[i] - score))


class ScoreClusterer(Protocol):
    def fit(self, scores: Sequence[float], k: int) -> ClusterAssignment:
        ...


class KMeansScoreClusterer:
    """k-means over the single score dimension, backed by scikit-learn."""

    def __init__(self, random_state: Optional[int] = 0, n_init: int = 10):
        self.random_state = random_state
        self.n_init = n_init

    def fit(self, scores: Sequence[float], k: int) -> ClusterAssignment:
        if len(scores) == 0:
            return ClusterAssignment()

        data = np.asarray(scores, dtype=float).reshape(-1, 1)
        distinct = len(np.unique(data))
        n_clusters = min(k, distinct)
        if n_clusters < k:
            logger.debug("Only %d distinct scores; forming %d of %d clusters", distinct, n_clusters, k)

        try:
            model = KMeans(
                n_clusters=n_clusters,
                n_init=self.n_init,
                random_state=self.random_state,
            ).fit(data)
        except ValueError as e:
            raise ClusteringError(
                f"k-means failed: {e}",
                cluster_count=k,
                n_points=len(scores),
            ) from e

        return ClusterAssignment(
            labels=[int(label) for label in model.labels_],
            centroids=[float(c) for c in model.cluster_centers_[:, 0]],
        )
