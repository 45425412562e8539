"""
Corpus index - the statistics every BM25 variant scores against.

Built once per corpus, immutable afterwards:
- raw document texts (for returning ranked results)
- token sequence, length and term-frequency map per document
- document frequency per term (distinct documents, not raw counts)
- corpus size and average document length
- IDF cache (the only part that grows after construction)
"""

import logging
from collections import Counter
from typing import Callable, Dict, List, Optional, Sequence

from .errors import EmptyCorpusError, EmptyTokenizationError, MissingTokenizerError
from .idf import IDFCache


Tokenizer = Callable[[str], Sequence[str]]


class CorpusIndex:
    """
    Tokenized corpus with document and term statistics.

    Document ids are 0-based positions in the input sequence.
    """

    def __init__(
        self,
        corpus: Sequence[str],
        tokenizer: Tokenizer,
        logger: Optional[logging.Logger] = None,
        ubiquitous_idf: str = "clamp",
    ):
        """
        Tokenize and index a corpus.

        Args:
            corpus: Raw document texts, at least one
            tokenizer: Callable mapping text to a sequence of terms
                Must produce at least one term per document
            logger: Diagnostic sink (default: module logger)
            ubiquitous_idf: IDF policy for terms present in every document
                "clamp" (default) -> 0.0
                "legacy" -> ln(0.5 / (df + 0.5))

        Raises:
            EmptyCorpusError: corpus has no documents
            MissingTokenizerError: tokenizer is None or not callable
            EmptyTokenizationError: a document tokenized to nothing
        """
        corpus = list(corpus) if corpus is not None else []
        if not corpus:
            raise EmptyCorpusError()
        if tokenizer is None or not callable(tokenizer):
            raise MissingTokenizerError()

        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.tokenizer = tokenizer

        documents: List[str] = []
        tokenized: List[List[str]] = []
        term_freqs: List[Dict[str, int]] = []
        doc_lengths: List[int] = []
        doc_freqs: Counter = Counter()

        for i, doc in enumerate(corpus):
            tokens = list(tokenizer(doc))
            if not tokens:
                raise EmptyTokenizationError(i)

            frequencies = Counter(tokens)
            documents.append(doc)
            tokenized.append(tokens)
            term_freqs.append(dict(frequencies))
            doc_lengths.append(len(tokens))

            # One increment per document, however often the term repeats
            doc_freqs.update(frequencies.keys())

        self._documents = tuple(documents)
        self._tokenized = tuple(tuple(t) for t in tokenized)
        self._term_freqs = tuple(term_freqs)
        self._doc_lengths = tuple(doc_lengths)
        self._doc_freqs: Dict[str, int] = dict(doc_freqs)
        self._corpus_size = len(documents)
        self._avg_doc_len = sum(doc_lengths) / self._corpus_size

        self._idf_cache = IDFCache(
            self._doc_freqs,
            self._corpus_size,
            ubiquitous_idf=ubiquitous_idf,
            logger=self.logger,
        )

        self.logger.info(
            f"Corpus size: {self._corpus_size}, "
            f"Average document length: {self._avg_doc_len:.2f}"
        )
        self.logger.debug(f"Indexed {len(self._doc_freqs)} unique terms")

    @property
    def corpus_size(self) -> int:
        return self._corpus_size

    @property
    def avg_doc_len(self) -> float:
        return self._avg_doc_len

    @property
    def doc_lengths(self) -> List[int]:
        """Token count per document (a fresh list on every access)"""
        return list(self._doc_lengths)

    @property
    def documents(self) -> Sequence[str]:
        return self._documents

    @property
    def tokenized(self) -> Sequence[Sequence[str]]:
        return self._tokenized

    @property
    def ubiquitous_idf(self) -> str:
        return self._idf_cache.ubiquitous_idf

    def doc_freq(self, term: str) -> int:
        """Number of documents containing the term at least once"""
        return self._doc_freqs.get(term, 0)

    def term_freq(self, term: str, doc_id: int) -> int:
        """Raw count of the term in one document"""
        return self._term_freqs[doc_id].get(term, 0)

    def doc_length(self, doc_id: int) -> int:
        return self._doc_lengths[doc_id]

    def idf(self, term: str) -> float:
        """
        Cached IDF of a term.

        Raises:
            EmptyTermError: term is the empty string
        """
        return self._idf_cache.get(term)

    def __len__(self) -> int:
        return self._corpus_size

    def __repr__(self) -> str:
        return (
            f"CorpusIndex(corpus_size={self._corpus_size}, "
            f"avg_doc_len={self._avg_doc_len:.2f}, terms={len(self._doc_freqs)})"
        )
