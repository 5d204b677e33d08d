"""Leave-one-out comparison of every profile in a corpus against the rest."""

import os
import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Mapping, Optional

import psutil
from tqdm import tqdm

from resemblance.clustering import KMeansScoreClusterer, ResultsClusterer
from resemblance.config.settings import ClusteringSettings, Settings, ShingleOptions
from resemblance.data.corpus import load_corpus
from resemblance.domain.models import ProfileMatch, ProfileReport
from resemblance.scoring import build_corpus, evaluate_shingle_sets
from resemblance.utils.timing import section_timer

logger = logging.getLogger(__name__)


@dataclass
class ComparisonRun:
    """Reports for every profile plus run metrics."""
    reports: List[ProfileReport] = field(default_factory=list)
    metrics: Dict[str, float] = field(default_factory=dict)

    def lines(self) -> List[str]:
        out: List[str] = []
        for report in self.reports:
            out.extend(match.format_line() for match in report.matches)
            out.append(report.format_range())
        return out


class ProfileComparison:
    """Scores each profile against all the others and clusters the scores."""

    def __init__(
        self,
        shingle_options: Optional[ShingleOptions] = None,
        clustering: Optional[ClusteringSettings] = None,
        show_progress: bool = False,
    ):
        self.shingle_options = shingle_options or ShingleOptions(use_variable_n=True)
        self.clustering = clustering or ClusteringSettings()
        self.shingle_options.validate()
        self.clustering.validate()
        self.show_progress = show_progress
        self.clusterer = KMeansScoreClusterer(
            random_state=self.clustering.random_state,
            n_init=self.clustering.n_init,
        )
        self.process = psutil.Process(os.getpid())
        self.metrics: Dict[str, float] = {
            'profiles': 0,
            'comparisons': 0,
            'matches': 0,
            'processing_time': 0.0,
            'rss_mb': 0.0,
        }

    def compare_one(self, profile: Hashable, profile_sets: Mapping) -> ProfileReport:
        """Score ``profile`` against every other entry of ``profile_sets``."""
        others = {name: shingles for name, shingles in profile_sets.items() if name != profile}
        r_max, results = evaluate_shingle_sets(profile_sets[profile], others, self.shingle_options)
        self.metrics['comparisons'] += len(results)

        clustered = ResultsClusterer(results, self.clustering.cluster_count, clusterer=self.clusterer)
        matches = [
            ProfileMatch(profile, name, r)
            for name, r in clustered.results_over_threshold(self.clustering.r_threshold)
        ]
        min_r = max_r = None
        if clustered.centroids:
            min_r, max_r = clustered.min_and_max_r()
        else:
            logger.info("Profile %r has nothing to compare against", profile)
        return ProfileReport(profile, r_max, matches, min_r, max_r)

    def run(self, profiles: Mapping[Hashable, str]) -> ComparisonRun:
        reports: List[ProfileReport] = []
        with section_timer("compare_profiles", logger) as timing:
            profile_sets = build_corpus(profiles, self.shingle_options)
            names = list(profile_sets)
            for profile in tqdm(names, desc="Profiles", unit="profile", disable=not self.show_progress):
                report = self.compare_one(profile, profile_sets)
                self.metrics['matches'] += len(report.matches)
                reports.append(report)

        self.metrics['profiles'] = len(names)
        self.metrics['processing_time'] = timing.elapsed
        self.metrics['rss_mb'] = self.process.memory_info().rss / (1024 * 1024)
        logger.info(
            "Compared %d profiles (%d comparisons, %d matches) in %.2fs",
            self.metrics['profiles'], self.metrics['comparisons'],
            self.metrics['matches'], self.metrics['processing_time'],
        )
        return ComparisonRun(reports=reports, metrics=dict(self.metrics))


def compare_profiles(
    profiles: Mapping[Hashable, str],
    shingle_options: Optional[ShingleOptions] = None,
    clustering: Optional[ClusteringSettings] = None,
    show_progress: bool = False,
) -> List[ProfileReport]:
    """Leave-one-out comparison of ``profiles``; one report per profile."""
    return ProfileComparison(shingle_options, clustering, show_progress).run(profiles).reports


def run_profile_comparison(settings: Settings) -> ComparisonRun:
    """Load the configured corpus file and compare its profiles."""
    profiles = load_corpus(settings.corpus_path)
    runner = ProfileComparison(
        settings.shingles,
        settings.clustering,
        show_progress=settings.show_progress,
    )
    return runner.run(profiles)
