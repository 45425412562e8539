"""
BM25-family relevance scoring over a fixed corpus.

Components:
- corpus_index: tokenized corpus, document lengths, document frequencies
- idf: lazily cached inverse document frequency
- scorers: Okapi BM25, BM25L and BM25+ over a shared CorpusIndex
- ranking: stable top-N selection
- tokenizer: reference tokenizers (whitespace, stemmed/stopworded)
- settings / logging_config: environment configuration and logging setup

The caller supplies the tokenizer; queries are term sequences or raw
strings tokenized with the same tokenizer as the corpus.
"""

from .errors import (
    BM25Error,
    EmptyCorpusError,
    MissingTokenizerError,
    EmptyTokenizationError,
    InvalidK1Error,
    InvalidBError,
    InvalidDeltaError,
    IDFPolicyMismatchError,
    UnknownVariantError,
    EmptyQueryError,
    EmptyTermError,
    EmptyDocumentIDsError,
    InvalidDocumentIDError,
    InvalidNError,
)
from .corpus_index import CorpusIndex
from .idf import IDFCache
from .ranking import RankedDocument, rank_documents, top_n_indices
from .scorers import (
    BM25Scorer,
    OkapiBM25,
    BM25L,
    BM25Plus,
    ScorerFactory,
    create_scorer,
)
from .settings import ScorerSettings, load_settings
from .tokenizer import tokenize, whitespace_tokenize, make_tokenizer
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "BM25Error",
    "EmptyCorpusError",
    "MissingTokenizerError",
    "EmptyTokenizationError",
    "InvalidK1Error",
    "InvalidBError",
    "InvalidDeltaError",
    "IDFPolicyMismatchError",
    "UnknownVariantError",
    "EmptyQueryError",
    "EmptyTermError",
    "EmptyDocumentIDsError",
    "InvalidDocumentIDError",
    "InvalidNError",
    "CorpusIndex",
    "IDFCache",
    "RankedDocument",
    "rank_documents",
    "top_n_indices",
    "BM25Scorer",
    "OkapiBM25",
    "BM25L",
    "BM25Plus",
    "ScorerFactory",
    "create_scorer",
    "ScorerSettings",
    "load_settings",
    "tokenize",
    "whitespace_tokenize",
    "make_tokenizer",
    "setup_logging",
]
