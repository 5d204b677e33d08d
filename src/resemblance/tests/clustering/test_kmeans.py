from unittest.mock import patch

import pytest

from resemblance.clustering.kmeans import ClusterAssignment, KMeansScoreClusterer
from resemblance.domain.exceptions import ClusteringError


@pytest.fixture
def clusterer() -> KMeansScoreClusterer:
    return KMeansScoreClusterer(random_state=0)


def test_empty_scores_give_empty_assignment(clusterer):
    assignment = clusterer.fit([], 5)
    assert assignment == ClusterAssignment()
    assert assignment.cluster_count == 0


def test_labels_follow_input_order(clusterer):
    assignment = clusterer.fit([0.9, 0.05, 0.85, 0.02], 2)
    assert len(assignment.labels) == 4
    assert assignment.labels[0] == assignment.labels[2]
    assert assignment.labels[1] == assignment.labels[3]
    assert assignment.labels[0] != assignment.labels[1]


def test_centroids_are_plain_floats(clusterer):
    assignment = clusterer.fit([0.1, 0.2, 0.9], 2)
    assert all(type(c) is float for c in assignment.centroids)
    assert all(type(label) is int for label in assignment.labels)


def test_group_count_capped_by_distinct_scores(clusterer):
    assignment = clusterer.fit([0.3, 0.3, 0.7], 5)
    assert assignment.cluster_count == 2


def test_deterministic_for_fixed_seed():
    scores = [0.11, 0.12, 0.4, 0.42, 0.8, 0.81, 0.95]
    first = KMeansScoreClusterer(random_state=7).fit(scores, 3)
    second = KMeansScoreClusterer(random_state=7).fit(scores, 3)
    assert first == second


def test_nearest_centroid():
    assignment = ClusterAssignment(labels=[0, 1], centroids=[0.1, 0.8])
    assert assignment.nearest(0.3) == 0
    assert assignment.nearest(0.6) == 1


def test_nearest_without_clusters_raises():
    with pytest.raises(ClusteringError):
        ClusterAssignment().nearest(0.5)


def test_library_errors_are_wrapped(clusterer):
    with patch("resemblance.clustering.kmeans.KMeans") as mock_kmeans:
        mock_kmeans.return_value.fit.side_effect = ValueError("bad input")
        with pytest.raises(ClusteringError) as exc_info:
            clusterer.fit([0.1, 0.2], 2)
    assert "bad input" in str(exc_info.value)
    assert exc_info.value.context["n_points"] == 2
