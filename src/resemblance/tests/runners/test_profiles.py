from unittest.mock import patch

import pytest

from resemblance.config.settings import ClusteringSettings, Settings, ShingleOptions
from resemblance.domain.exceptions import ConfigurationError
from resemblance.scoring import build_corpus
from resemblance.runners.profiles import (
    ComparisonRun,
    ProfileComparison,
    compare_profiles,
    run_profile_comparison,
)


@pytest.fixture
def profiles():
    return {
        "a": "the quick brown fox jumps over",
        "b": "the quick brown fox jumps over the dog",
        "c": "completely different words entirely",
        "d": "nothing in common here whatsoever",
    }


class TestCompareProfiles:
    """Test the leave-one-out comparison."""

    def test_one_report_per_profile(self, profiles):
        reports = compare_profiles(profiles)
        assert [report.profile for report in reports] == ["a", "b", "c", "d"]

    def test_profile_never_compared_with_itself(self, profiles):
        reports = compare_profiles(profiles, clustering=ClusteringSettings(r_threshold=0.0))
        for report in reports:
            assert report.profile not in {match.name for match in report.matches}

    def test_close_texts_match_each_other(self, profiles):
        reports = {report.profile: report for report in compare_profiles(profiles)}
        assert [match.name for match in reports["a"].matches] == ["b"]
        assert [match.name for match in reports["b"].matches] == ["a"]
        assert reports["a"].r_max == reports["a"].matches[0].r

    def test_reports_carry_centroid_range(self, profiles):
        report = compare_profiles(profiles)[0]
        assert report.has_clusters
        assert report.min_r <= report.max_r
        assert report.max_r == pytest.approx(report.r_max)

    def test_single_profile_has_no_clusters(self):
        [report] = compare_profiles({"solo": "just me"})
        assert report.matches == []
        assert not report.has_clusters
        assert report.r_max == 0.0

    def test_shingle_sets_built_once(self, profiles):
        with patch("resemblance.runners.profiles.build_corpus", wraps=build_corpus) as spy:
            compare_profiles(profiles)
        spy.assert_called_once()


class TestProfileComparison:

    def test_metrics(self, profiles):
        run = ProfileComparison().run(profiles)
        assert isinstance(run, ComparisonRun)
        assert run.metrics["profiles"] == 4
        assert run.metrics["comparisons"] == 12
        assert run.metrics["matches"] == 2
        assert run.metrics["rss_mb"] > 0

    def test_processing_time_comes_from_section_timer(self, profiles):
        with patch("resemblance.utils.timing.time") as mock_time:
            mock_time.perf_counter.side_effect = [10.0, 12.5]
            run = ProfileComparison().run(profiles)
        assert run.metrics["processing_time"] == 2.5

    def test_lines(self, profiles):
        lines = ProfileComparison().run(profiles).lines()
        assert lines[0].startswith("a <")
        assert lines[0].endswith("> b")
        assert lines[1].startswith("a Min R: ")
        assert sum("Min R:" in line for line in lines) == 4

    def test_invalid_settings_rejected(self):
        with pytest.raises(ConfigurationError):
            ProfileComparison(clustering=ClusteringSettings(cluster_count=0))
        with pytest.raises(ConfigurationError):
            ProfileComparison(shingle_options=ShingleOptions(n=0))


def test_run_profile_comparison_loads_corpus(tmp_path):
    corpus = tmp_path / "profiles.yml"
    corpus.write_text("x: hello there world\ny: hello there world again\n")
    settings = Settings(corpus_path=corpus, show_progress=False)
    run = run_profile_comparison(settings)
    assert [report.profile for report in run.reports] == ["x", "y"]
