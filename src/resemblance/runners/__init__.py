"""Batch runners."""

from .profiles import ComparisonRun, ProfileComparison, compare_profiles, run_profile_comparison

__all__ = ["ComparisonRun", "ProfileComparison", "compare_profiles", "run_profile_comparison"]
