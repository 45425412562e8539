"""
BM25+ - Okapi BM25 with a per-match floor.

Long documents can push the Okapi term weight arbitrarily close to zero,
ranking a long matching document below a short non-matching one. BM25+
adds a constant delta to the weight of every matched term:

    score(t, d) = idf(t) × ((tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl)) + delta)

Unmatched terms (tf = 0) still contribute nothing.
"""

import logging
import math
from typing import Any, Dict, Optional, Sequence, Union

from ..corpus_index import CorpusIndex, Tokenizer
from ..errors import InvalidDeltaError
from .base import BM25Scorer, _is_real


class BM25Plus(BM25Scorer):
    """Okapi BM25 with a lower bound of idf × delta per matched term."""

    name = "bm25plus"

    def __init__(
        self,
        corpus: Union[Sequence[str], CorpusIndex],
        tokenizer: Optional[Tokenizer] = None,
        k1: float = 1.2,
        b: float = 0.75,
        delta: float = 1.0,
        logger: Optional[logging.Logger] = None,
        ubiquitous_idf: Optional[str] = None,
    ):
        """
        Initialize BM25+ scorer.

        Args:
            delta: Additive floor per matched term
                Must be finite
                Default: 1.0

            Remaining arguments as in BM25Scorer.

        Raises:
            InvalidDeltaError: delta is NaN, infinite or not a number
        """
        if not (_is_real(delta) and math.isfinite(delta)):
            raise InvalidDeltaError(delta)
        self.delta = float(delta)

        super().__init__(
            corpus,
            tokenizer,
            k1=k1,
            b=b,
            logger=logger,
            ubiquitous_idf=ubiquitous_idf,
        )

    def _term_score(self, tf: int, doc_len: int, idf: float) -> float:
        numerator = tf * (self.k1 + 1)
        denominator = tf + self.k1 * self._length_norm(doc_len)
        return idf * (numerator / denominator + self.delta)

    def get_params(self) -> Dict[str, Any]:
        params = super().get_params()
        params["delta"] = self.delta
        return params
