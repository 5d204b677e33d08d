"""Utility functions and helpers."""

from .timing import SectionTiming, section_timer
from .logging import setup_logging

__all__ = [
    "SectionTiming",
    "section_timer",
    "setup_logging",
]
