"""
BM25 variant scorers.

Usage:
    # Pick a variant explicitly:
    from bm25_variants.scorers import BM25L

    scorer = BM25L(corpus, tokenizer=str.split, k1=1.2, b=0.75)
    scorer.get_top_n(["hello"], 1)

    # Or from environment (BM25_VARIANT, BM25_K1, ...):
    from bm25_variants.scorers import ScorerFactory

    scorer = ScorerFactory.create(corpus, tokenizer=str.split)
"""

from .base import BM25Scorer
from .okapi import OkapiBM25
from .bm25l import BM25L
from .bm25plus import BM25Plus
from .factory import VARIANTS, ScorerFactory, create_scorer

__all__ = [
    'BM25Scorer',
    'OkapiBM25',
    'BM25L',
    'BM25Plus',
    'VARIANTS',
    'ScorerFactory',
    'create_scorer',
]
