"""
Classic Okapi BM25.

Formula:
    score(t, d) = idf(t) × (tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl))

Where:
    tf = term frequency in document
    k1 = term frequency saturation parameter (default: 1.2)
    b = length normalization parameter (default: 0.75)
    dl = document length (number of tokens)
    avgdl = average document length across the corpus
"""

from .base import BM25Scorer


class OkapiBM25(BM25Scorer):
    """Robertson/Sparck Jones BM25 with smoothed, non-negative IDF."""

    name = "okapi"

    def _term_score(self, tf: int, doc_len: int, idf: float) -> float:
        numerator = tf * (self.k1 + 1)
        denominator = tf + self.k1 * self._length_norm(doc_len)
        return idf * numerator / denominator
