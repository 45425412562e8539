"""
BM25L - length-corrected term frequency.

Okapi BM25 over-penalizes long documents. BM25L first divides tf by the
length normalization factor and saturates the corrected frequency instead:

    c(t, d) = tf / (1 - b + b × dl/avgdl)
    score(t, d) = idf(t) × ((k1 + 1) × (c + delta)) / (k1 + c + delta)

With the default delta = 0 the score equals Okapi BM25 term for term; a
positive delta (Lv & Zhai suggest 0.5) shifts every matched term's
corrected frequency up, lifting long documents.
"""

import logging
import math
from typing import Any, Dict, Optional, Sequence, Union

from ..corpus_index import CorpusIndex, Tokenizer
from ..errors import InvalidDeltaError
from .base import BM25Scorer, _is_real


class BM25L(BM25Scorer):
    """BM25 saturating a length-corrected term frequency."""

    name = "bm25l"

    def __init__(
        self,
        corpus: Union[Sequence[str], CorpusIndex],
        tokenizer: Optional[Tokenizer] = None,
        k1: float = 1.2,
        b: float = 0.75,
        logger: Optional[logging.Logger] = None,
        ubiquitous_idf: Optional[str] = None,
        delta: float = 0.0,
    ):
        if not (_is_real(delta) and math.isfinite(delta) and delta >= 0):
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
        ctd = tf / self._length_norm(doc_len) + self.delta
        return idf * ((self.k1 + 1) * ctd) / (self.k1 + ctd)

    def get_params(self) -> Dict[str, Any]:
        params = super().get_params()
        params["delta"] = self.delta
        return params
