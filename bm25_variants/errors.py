"""
Error taxonomy for BM25 indexing and scoring.

Every failure is a caller-input contract violation, never a transient
condition: nothing here is worth retrying.

Construction-time:
- EmptyCorpusError, MissingTokenizerError, EmptyTokenizationError
- InvalidK1Error, InvalidBError, InvalidDeltaError, UnknownVariantError
- IDFPolicyMismatchError

Query-time:
- EmptyQueryError, EmptyTermError, EmptyDocumentIDsError
- InvalidDocumentIDError, InvalidNError
"""

from typing import Any


class BM25Error(ValueError):
    """Base class for all BM25 validation failures"""


class EmptyCorpusError(BM25Error):
    def __init__(self):
        super().__init__("corpus cannot be empty")


class MissingTokenizerError(BM25Error):
    def __init__(self):
        super().__init__("tokenizer function cannot be None")


class EmptyTokenizationError(BM25Error):
    """Tokenizer produced no terms for a document"""

    def __init__(self, document_index: int):
        self.document_index = document_index
        super().__init__(
            f"tokenizer returned no tokens for document at index {document_index}"
        )


class InvalidK1Error(BM25Error):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"k1 must be >= 0, got {value!r}")


class InvalidBError(BM25Error):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"b must be within [0, 1], got {value!r}")


class InvalidDeltaError(BM25Error):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"delta must be a finite number, got {value!r}")


class IDFPolicyMismatchError(BM25Error):
    """Scorer asked for a ubiquitous-term policy the shared index was not built with"""

    def __init__(self, requested: str, index_policy: str):
        self.requested = requested
        self.index_policy = index_policy
        super().__init__(
            f"ubiquitous_idf={requested!r} conflicts with the shared index policy {index_policy!r}"
        )


class UnknownVariantError(BM25Error):
    def __init__(self, variant: str, known):
        self.variant = variant
        super().__init__(
            f"Unknown BM25 variant: {variant}. Valid options: {', '.join(known)}"
        )


class EmptyQueryError(BM25Error):
    def __init__(self):
        super().__init__("query cannot be empty")


class EmptyTermError(BM25Error):
    def __init__(self):
        super().__init__("term cannot be empty")


class EmptyDocumentIDsError(BM25Error):
    def __init__(self):
        super().__init__("document ids cannot be empty")


class InvalidDocumentIDError(BM25Error):
    """Document id is not an integer in [0, corpus_size)"""

    def __init__(self, doc_id: Any, corpus_size: int):
        self.doc_id = doc_id
        self.corpus_size = corpus_size
        super().__init__(
            f"invalid document id {doc_id!r} (corpus has {corpus_size} documents)"
        )


class InvalidNError(BM25Error):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"n must be a positive integer, got {value!r}")
