"""
Lazily memoized inverse document frequency.

Formula (smoothed, always positive for 0 < df < N):
    idf(t) = ln((N - df + 0.5) / (df + 0.5) + 1)

Where:
    N  = corpus size
    df = number of documents containing t

Special cases:
    df == 0  -> 0.0 (unseen terms add nothing instead of a penalty)
    df == N  -> depends on the ubiquitous-term policy:
                "clamp"  -> 0.0
                "legacy" -> ln(0.5 / (df + 0.5)), negative and independent of N
"""

import logging
import math
from typing import Dict, Mapping, Optional

from .errors import EmptyTermError


UBIQUITOUS_IDF_POLICIES = ("clamp", "legacy")


class IDFCache:
    """
    Term -> IDF memo backed by a document-frequency table.

    The cache only grows: a value, once computed, is returned unchanged for
    the lifetime of the owning index.
    """

    def __init__(
        self,
        doc_freqs: Mapping[str, int],
        corpus_size: int,
        ubiquitous_idf: str = "clamp",
        logger: Optional[logging.Logger] = None,
    ):
        if ubiquitous_idf not in UBIQUITOUS_IDF_POLICIES:
            raise ValueError(
                f"Unknown ubiquitous_idf policy: {ubiquitous_idf}. "
                f"Valid options: {', '.join(UBIQUITOUS_IDF_POLICIES)}"
            )
        self._doc_freqs = doc_freqs
        self._corpus_size = corpus_size
        self.ubiquitous_idf = ubiquitous_idf
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._cache: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, term: str) -> bool:
        return term in self._cache

    def get(self, term: str) -> float:
        """
        Return IDF for a term, computing and caching it on first request.

        Raises:
            EmptyTermError: term is the empty string
        """
        if term == "":
            raise EmptyTermError()

        cached = self._cache.get(term)
        if cached is not None:
            return cached

        idf = self._compute(term)
        self._cache[term] = idf
        self.logger.debug(f"IDF for term '{term}': {idf:.4f}")
        return idf

    def _compute(self, term: str) -> float:
        df = self._doc_freqs.get(term, 0)
        if df == 0:
            return 0.0

        n = self._corpus_size
        if df == n:
            if self.ubiquitous_idf == "legacy":
                return math.log(0.5 / (df + 0.5))
            return 0.0

        return math.log((n - df + 0.5) / (df + 0.5) + 1.0)
