"""Core value types passed between the shingle, scoring and clustering layers."""

from dataclasses import dataclass, field
from typing import Hashable, List, NamedTuple, Optional, Dict, Any


class ScoredEntry(NamedTuple):
    """A corpus entry name paired with its resemblance to a candidate text."""
    name: Hashable
    r: float


class Evaluation(NamedTuple):
    """Result of scoring one text against a corpus; unpacks as (r_max, results)."""
    r_max: float
    results: List[ScoredEntry]


@dataclass(frozen=True)
class ProfileMatch:
    """A corpus entry that landed in a cluster above the threshold."""
    profile: Hashable
    name: Hashable
    r: float

    def format_line(self) -> str:
        return "%s <%.3f> %s" % (self.profile, self.r, self.name)


@dataclass(frozen=True)
class ProfileReport:
    """Leave-one-out outcome for a single profile."""
    profile: Hashable
    r_max: float
    matches: List[ProfileMatch] = field(default_factory=list)
    min_r: Optional[float] = None
    max_r: Optional[float] = None

    @property
    def has_clusters(self) -> bool:
        return self.min_r is not None and self.max_r is not None

    def format_range(self) -> str:
        if not self.has_clusters:
            return "%s Min R: n/a Max R: n/a" % (self.profile,)
        return "%s Min R: %.3f Max R: %.3f" % (self.profile, self.min_r, self.max_r)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile,
            "r_max": self.r_max,
            "matches": [(m.name, m.r) for m in self.matches],
            "min_r": self.min_r,
            "max_r": self.max_r,
        }
