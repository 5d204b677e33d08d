"""Threshold scored results by cluster centroid instead of by individual score."""

import logging
from typing import Hashable, List, Optional, Sequence, Tuple

from resemblance.clustering.kmeans import (
    ClusterAssignment,
    KMeansScoreClusterer,
    ScoreClusterer,
)
from resemblance.domain.exceptions import ClusteringError, InvalidArgumentError
from resemblance.domain.models import ScoredEntry

logger = logging.getLogger(__name__)

DEFAULT_CLUSTER_COUNT = 5


class ResultsClusterer:
    """Clusters ``(name, r)`` pairs on ``r`` once, at construction.

    A pair passes :meth:`results_over_threshold` when the centroid of the
    cluster it was assigned to exceeds the threshold, so an individually
    weak score can pass with a strong cohort and vice versa.
    """

    def __init__(
        self,
        results: Optional[Sequence[Tuple[Hashable, float]]],
        cluster_count: int = DEFAULT_CLUSTER_COUNT,
        clusterer: Optional[ScoreClusterer] = None,
    ):
        if results is None:
            raise InvalidArgumentError("results", None, expected="a list of (name, r) pairs")
        if isinstance(cluster_count, bool) or not isinstance(cluster_count, int) or cluster_count <= 0:
            raise InvalidArgumentError("cluster_count", cluster_count, expected="a positive integer")

        self._results = [ScoredEntry(name, float(r)) for name, r in results]
        self._cluster_count = cluster_count
        self._clusterer = clusterer or KMeansScoreClusterer()
        self._assignment: ClusterAssignment = self._clusterer.fit(
            [entry.r for entry in self._results], cluster_count
        )

        if len(self._assignment.labels) != len(self._results):
            raise ClusteringError(
                "Clusterer returned a label count that does not match the results",
                cluster_count=cluster_count,
                n_points=len(self._results),
            )
        logger.debug("Clustered %d results into %d groups", len(self._results), self._assignment.cluster_count)

    @property
    def results(self) -> List[ScoredEntry]:
        return list(self._results)

    @property
    def centroids(self) -> List[float]:
        return list(self._assignment.centroids)

    @property
    def labels(self) -> List[int]:
        return list(self._assignment.labels)

    def centroid_for(self, index: int) -> float:
        """Centroid score of the cluster the ``index``-th result was assigned to."""
        return self._assignment.centroids[self._assignment.labels[index]]

    def cluster_of(self, pair: Tuple[Hashable, float]) -> int:
        """Cluster of ``pair``; pairs not in the results go to the nearest centroid."""
        entry = ScoredEntry(pair[0], float(pair[1]))
        for i, known in enumerate(self._results):
            if known == entry:
                return self._assignment.labels[i]
        return self._assignment.nearest(entry.r)

    def results_over_threshold(self, r_threshold: float) -> List[ScoredEntry]:
        """Pairs whose cluster centroid is strictly above ``r_threshold``."""
        return [
            entry
            for i, entry in enumerate(self._results)
            if self.centroid_for(i) > r_threshold
        ]

    results_over_r_threshold = results_over_threshold

    def min_and_max_r(self) -> Tuple[float, float]:
        centroids = self._assignment.centroids
        if not centroids:
            raise ClusteringError(
                "No clusters were formed; nothing to report",
                cluster_count=self._cluster_count,
                n_points=len(self._results),
            )
        return min(centroids), max(centroids)

    def top_cluster_results(self) -> List[ScoredEntry]:
        """Members of the cluster with the largest centroid."""
        if not self._assignment.centroids:
            return []
        centroids = self._assignment.centroids
        top = max(range(len(centroids)), key=centroids.__getitem__)
        return [
            entry
            for entry, label in zip(self._results, self._assignment.labels)
            if label == top
        ]


def clustered_results_over_r_threshold(
    results: Sequence[Tuple[Hashable, float]],
    r_threshold: float,
    cluster_count: int = DEFAULT_CLUSTER_COUNT,
) -> List[ScoredEntry]:
    """Cluster ``results`` and keep those in clusters above ``r_threshold``."""
    return ResultsClusterer(results, cluster_count).results_over_threshold(r_threshold)
