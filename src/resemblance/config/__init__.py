"""Run configuration."""

from .settings import (
    Settings,
    ShingleOptions,
    ClusteringSettings,
    LoggingSettings,
    EvaluationMethod,
    LogLevel,
    DEFAULT_N,
)

__all__ = [
    "Settings",
    "ShingleOptions",
    "ClusteringSettings",
    "LoggingSettings",
    "EvaluationMethod",
    "LogLevel",
    "DEFAULT_N",
]
