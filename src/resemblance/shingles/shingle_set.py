"""Shingle sets: overlapping token windows used as the unit of comparison.

A shingle is ``n`` consecutive tokens joined by a single space. Character
shingles ("n-graphs") use one token per character; word shingles
("n-grams") use one token per whitespace-delimited word. Both flavours are
the same class configured by :class:`EvaluationMethod`.
"""

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from resemblance.config.settings import ShingleOptions, DEFAULT_N
from resemblance.domain.exceptions import (
    InvalidArgumentError,
    DegenerateComparisonError,
)

logger = logging.getLogger(__name__)

# U+2400 SYMBOL FOR NULL; removed from input text whatever the removal
# pattern, so it never appears as a real token.
PAD_TOKEN = "␀"

OptionsLike = Union[ShingleOptions, Mapping[str, Any], None]


def tokenize(text: str, options: ShingleOptions) -> List[str]:
    """Strip removable characters and the padding symbol, then split into
    non-empty tokens."""
    cleaned = options.removal_regex.sub("", text).replace(PAD_TOKEN, "")
    return [token for token in options.separator_regex.split(cleaned) if token]


def generate_shingles(tokens: List[str], n: int) -> List[str]:
    """Return the ordered, de-duplicated shingles of length ``n``.

    One window starts at every token; windows running past the end are
    padded on the right with :data:`PAD_TOKEN`. Fewer than ``n`` tokens
    give a single padded shingle.
    """
    if not tokens:
        return []
    if len(tokens) < n:
        return [" ".join(tokens + [PAD_TOKEN] * (n - len(tokens)))]

    seen: Set[str] = set()
    shingles: List[str] = []
    for i in range(len(tokens)):
        window = tokens[i:i + n]
        if len(window) < n:
            window = window + [PAD_TOKEN] * (n - len(window))
        shingle = " ".join(window)
        if shingle not in seen:
            seen.add(shingle)
            shingles.append(shingle)
    return shingles


def _check_n(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidArgumentError("n", n, expected="a positive integer")
    return n


class ShingleSet:
    """One text plus a per-``n`` cache of its shingles."""

    def __init__(self, text: str, options: OptionsLike = None):
        if not isinstance(text, str):
            raise InvalidArgumentError("text", type(text).__name__, expected="str")

        self._options = ShingleOptions.from_mapping(options)
        self._options.validate()
        self._text = text
        self._data_size: Optional[int] = None
        self._tokens: Optional[List[str]] = None
        self._lock = threading.Lock()
        self._shingles_by_n: Dict[int, List[str]] = {}

        self.shingles_for(self._options.n)

    @property
    def original_text(self) -> str:
        return self._text

    @property
    def options(self) -> ShingleOptions:
        return self._options

    @property
    def evaluation_method(self):
        return self._options.evaluation_method

    @property
    def data_size(self) -> int:
        """Length of the original text in characters."""
        if self._data_size is None:
            self._data_size = len(self._text)
        return self._data_size

    @property
    def tokens(self) -> List[str]:
        if self._tokens is None:
            self._tokens = tokenize(self._text, self._options)
        return list(self._tokens)

    def cached_lengths(self) -> List[int]:
        """Shingle lengths computed so far, in insertion order."""
        return list(self._shingles_by_n)

    def shingles_for(self, n: int) -> List[str]:
        """Shingles of length ``n``, computed once and cached."""
        n = _check_n(n)
        cached = self._shingles_by_n.get(n)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._shingles_by_n.get(n)
            if cached is None:
                if self._tokens is None:
                    self._tokens = tokenize(self._text, self._options)
                cached = generate_shingles(self._tokens, n)
                self._shingles_by_n[n] = cached
                logger.debug("Built %d shingles of length %d", len(cached), n)
        return cached

    def intersection(self, other: "ShingleSet", n: int = DEFAULT_N) -> Set[str]:
        return set(self.shingles_for(n)).intersection(other.shingles_for(n))

    def union(self, other: "ShingleSet", n: int = DEFAULT_N) -> Set[str]:
        return set(self.shingles_for(n)).union(other.shingles_for(n))

    def resemblance(self, other: "ShingleSet", n: int = DEFAULT_N) -> float:
        """Jaccard ratio of the two shingle sets at length ``n``.

        Two empty sets have no defined ratio: 0.0 is returned, unless the
        options ask for ``strict`` comparisons, in which case
        :class:`DegenerateComparisonError` is raised.
        """
        mine = set(self.shingles_for(n))
        theirs = set(other.shingles_for(n))
        union_size = len(mine | theirs)
        if union_size == 0:
            if self._options.strict or other.options.strict:
                raise DegenerateComparisonError(n=n)
            logger.warning("Both shingle sets are empty at n=%d; resemblance set to 0.0", n)
            return 0.0
        return len(mine & theirs) / union_size

    r = resemblance

    def __len__(self) -> int:
        return len(self.shingles_for(self._options.n))

    def __repr__(self) -> str:
        return (
            f"ShingleSet(method={self.evaluation_method.value}, n={self._options.n}, "
            f"data_size={self.data_size})"
        )


def build_shingle_set(text: str, options: OptionsLike = None) -> ShingleSet:
    """Build a shingle set for ``text`` using the configured evaluation method."""
    return ShingleSet(text, options)
