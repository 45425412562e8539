"""
Abstract base class for BM25 variants.

All variants share one CorpusIndex (statistics + IDF cache) and the same
query validation. A variant only supplies its per-term contribution:

    score(q, d) = Σ contribution(tf(t, d), |d|, idf(t))   for t in q, tf > 0

Terms absent from a document contribute exactly 0.0.
"""

import logging
import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..corpus_index import CorpusIndex, Tokenizer
from ..errors import (
    EmptyDocumentIDsError,
    EmptyQueryError,
    IDFPolicyMismatchError,
    InvalidBError,
    InvalidDocumentIDError,
    InvalidK1Error,
    InvalidNError,
)
from ..ranking import RankedDocument, rank_documents

Query = Union[str, Sequence[str]]


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class BM25Scorer(ABC):
    """
    Common scoring contract for every BM25 variant.

    Subclasses set `name` and implement `_term_score`.
    """

    name: str = ""

    def __init__(
        self,
        corpus: Union[Sequence[str], CorpusIndex],
        tokenizer: Optional[Tokenizer] = None,
        k1: float = 1.2,
        b: float = 0.75,
        logger: Optional[logging.Logger] = None,
        ubiquitous_idf: Optional[str] = None,
    ):
        """
        Initialize scorer.

        Args:
            corpus: Raw document texts, or an existing CorpusIndex to share
                (tokenizer, logger and ubiquitous_idf then come from the index)

            tokenizer: Callable mapping text to a sequence of terms
                Required unless corpus is a CorpusIndex

            k1: Term frequency saturation parameter
                Higher = repeated terms keep adding score for longer
                Range: >= 0
                Default: 1.2 (standard)

            b: Length normalization parameter
                Higher = more penalty for long documents
                Range: 0.0 - 1.0
                Default: 0.75 (standard)

            logger: Diagnostic sink (default: module logger)

            ubiquitous_idf: IDF policy for terms found in every document
                See bm25_variants.idf
                Default: "clamp" for a new index, the index policy for a shared one

        Raises:
            InvalidK1Error, InvalidBError: parameter out of range
            IDFPolicyMismatchError: ubiquitous_idf differs from the shared index policy
            EmptyCorpusError, MissingTokenizerError, EmptyTokenizationError:
                corpus could not be indexed
        """
        if not (_is_real(k1) and math.isfinite(k1) and k1 >= 0):
            raise InvalidK1Error(k1)
        if not (_is_real(b) and 0 <= b <= 1):
            raise InvalidBError(b)

        self.k1 = float(k1)
        self.b = float(b)

        if isinstance(corpus, CorpusIndex):
            if ubiquitous_idf is not None and ubiquitous_idf != corpus.ubiquitous_idf:
                raise IDFPolicyMismatchError(ubiquitous_idf, corpus.ubiquitous_idf)
            self.index = corpus
        else:
            self.index = CorpusIndex(
                corpus,
                tokenizer,
                logger=logger,
                ubiquitous_idf=ubiquitous_idf if ubiquitous_idf is not None else "clamp",
            )
        self.logger = logger if logger is not None else self.index.logger

        if tokenizer is not None and tokenizer is not self.index.tokenizer:
            # Queries are always tokenized like the corpus
            self.logger.warning("Ignoring tokenizer: shared index keeps its own")

        self.logger.debug(f"Created {self!r}")

    @classmethod
    def from_index(cls, index: CorpusIndex, **params):
        """Build a scorer over an already indexed corpus (no re-tokenization)."""
        return cls(index, **params)

    # ------------------------------------------------------------------
    # Variant formula
    # ------------------------------------------------------------------

    def _length_norm(self, doc_len: int) -> float:
        """1 - b + b * |d| / avgdl"""
        return 1.0 - self.b + self.b * doc_len / self.index.avg_doc_len

    @abstractmethod
    def _term_score(self, tf: int, doc_len: int, idf: float) -> float:
        """
        Contribution of one query term to one document.

        Only called with tf > 0.
        """
        pass

    def get_params(self) -> Dict[str, Any]:
        """Variant name and tuning parameters."""
        return {"variant": self.name, "k1": self.k1, "b": self.b}

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def corpus_size(self) -> int:
        return self.index.corpus_size

    @property
    def avg_doc_len(self) -> float:
        return self.index.avg_doc_len

    @property
    def doc_lengths(self) -> List[int]:
        return self.index.doc_lengths

    def idf(self, term: str) -> float:
        return self.index.idf(term)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def _weighted_terms(self, query: Query) -> List[Tuple[str, float]]:
        """
        Validate a query and attach IDF to each term.

        A string query is tokenized with the index tokenizer; a sequence is
        taken as already tokenized. Duplicated terms are kept.
        """
        if query is None:
            terms: List[str] = []
        elif isinstance(query, str):
            terms = list(self.index.tokenizer(query))
        else:
            terms = list(query)

        if not terms:
            raise EmptyQueryError()

        return [(term, self.index.idf(term)) for term in terms]

    def _score_document(self, weighted_terms: List[Tuple[str, float]], doc_id: int) -> float:
        doc_len = self.index.doc_length(doc_id)
        score = 0.0
        for term, idf in weighted_terms:
            tf = self.index.term_freq(term, doc_id)
            if tf == 0:
                continue
            score += self._term_score(tf, doc_len, idf)
        return score

    def get_scores(self, query: Query) -> List[float]:
        """
        Score every document against the query.

        Args:
            query: Query terms, or raw query text to tokenize

        Returns:
            One score per document, in document-id order

        Raises:
            EmptyQueryError: query has no terms
            EmptyTermError: query contains an empty term
        """
        weighted_terms = self._weighted_terms(query)
        return [
            self._score_document(weighted_terms, doc_id)
            for doc_id in range(self.index.corpus_size)
        ]

    def get_batch_scores(self, query: Query, doc_ids: Sequence[int]) -> List[float]:
        """
        Score a subset of documents.

        Args:
            query: Query terms, or raw query text to tokenize
            doc_ids: Document ids to score (order and duplicates preserved)

        Returns:
            Scores aligned with doc_ids

        Raises:
            EmptyQueryError: query has no terms
            EmptyDocumentIDsError: doc_ids is empty
            InvalidDocumentIDError: an id is not an integer in [0, corpus_size)
        """
        weighted_terms = self._weighted_terms(query)

        if doc_ids is None or len(doc_ids) == 0:
            raise EmptyDocumentIDsError()

        corpus_size = self.index.corpus_size
        for doc_id in doc_ids:
            if not _is_integer(doc_id) or doc_id < 0 or doc_id >= corpus_size:
                raise InvalidDocumentIDError(doc_id, corpus_size)

        return [self._score_document(weighted_terms, int(doc_id)) for doc_id in doc_ids]

    def _check_n(self, n: int) -> None:
        if not _is_integer(n) or n <= 0:
            raise InvalidNError(n)

    def get_top_n(self, query: Query, n: int) -> List[str]:
        """
        Original texts of the n best documents.

        Returns:
            min(n, corpus_size) texts, descending score, ties by document id

        Raises:
            EmptyQueryError: query has no terms
            InvalidNError: n is not a positive integer
        """
        return [ranked.text for ranked in self.rank(query, n)]

    def rank(self, query: Query, n: int) -> List[RankedDocument]:
        """Same selection as get_top_n, keeping ids and scores."""
        weighted_terms = self._weighted_terms(query)
        self._check_n(n)

        scores = [
            self._score_document(weighted_terms, doc_id)
            for doc_id in range(self.index.corpus_size)
        ]
        return rank_documents(scores, self.index.documents, n)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v}" for k, v in self.get_params().items() if k != "variant")
        return f"{type(self).__name__}({params}, corpus_size={self.corpus_size})"
