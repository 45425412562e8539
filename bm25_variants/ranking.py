"""
Top-N selection over a score vector.

Ordering: descending score, ties broken by ascending document id.
numpy's default quicksort is not stable, so selection always sorts with
kind="stable" on the negated scores.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np


@dataclass(frozen=True)
class RankedDocument:
    """Single ranked result"""
    doc_id: int     # Position in the indexed corpus
    score: float    # Variant score (higher = more relevant)
    text: str       # Original document text


def top_n_indices(scores: Sequence[float], n: int) -> List[int]:
    """
    Document ids of the n best scores.

    Args:
        scores: One score per document, in document-id order
        n: Number of ids to return (capped at len(scores))

    Returns:
        Ids sorted by score (descending), equal scores in id order

    Example:
        >>> top_n_indices([0.5, 1.2, 0.5, 0.0], 3)
        [1, 0, 2]
    """
    scores = np.asarray(scores, dtype=np.float64)
    n = min(n, len(scores))
    order = np.argsort(-scores, kind="stable")[:n]
    return [int(i) for i in order]


def rank_documents(
    scores: Sequence[float],
    documents: Sequence[str],
    n: int
) -> List[RankedDocument]:
    """Pair the top-n ids with their scores and original texts."""
    return [
        RankedDocument(doc_id=i, score=float(scores[i]), text=documents[i])
        for i in top_n_indices(scores, n)
    ]
