"""
Reference tokenizers.

Scorers never tokenize on their own terms: the caller passes a tokenizer
when indexing. These two cover the common cases.

whitespace_tokenize: split on runs of whitespace, nothing else
tokenize:
1. Lowercase conversion
2. Extract alphanumeric words (inner hyphens preserved)
3. Drop stopwords and pure numbers
4. Snowball stemming (optional)
"""

import re
from typing import AbstractSet, Callable, List

from .stemmer import stem

# Lucene/Elasticsearch default English stopword list
STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'if', 'in', 'into', 'is', 'it',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'will', 'with'
])

_WORD_PATTERN = re.compile(r'\b[a-z0-9]+(?:-[a-z0-9]+)*\b')
_NUMBER_PATTERN = re.compile(r'^[0-9-]+$')


def whitespace_tokenize(text: str) -> List[str]:
    """
    Split text on whitespace, keeping case and punctuation.

    Examples:
        >>> whitespace_tokenize("this is a test")
        ['this', 'is', 'a', 'test']
    """
    if not text:
        return []
    return text.split()


def tokenize(
    text: str,
    stopwords: AbstractSet[str] = STOPWORDS,
    stemming: bool = True
) -> List[str]:
    """
    Normalize text into index terms.

    Args:
        text: Input text
        stopwords: Words to drop (after lowercasing, before stemming)
        stemming: Apply Snowball stemming

    Returns:
        Lowercase (optionally stemmed) terms, stopwords and numbers removed

    Examples:
        >>> tokenize("Ranking documents by BM25 scores!")
        ['rank', 'document', 'bm25', 'score']

        >>> tokenize("The 3 rankers", stemming=False)
        ['rankers']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    tokens = _WORD_PATTERN.findall(text.lower())
    tokens = [
        t for t in tokens
        if t not in stopwords and not _NUMBER_PATTERN.match(t)
    ]

    if stemming:
        tokens = [stem(t) for t in tokens]

    return tokens


def make_tokenizer(
    stopwords: AbstractSet[str] = STOPWORDS,
    stemming: bool = True
) -> Callable[[str], List[str]]:
    """Bind tokenize() options into a single-argument tokenizer."""
    def _tokenize(text: str) -> List[str]:
        return tokenize(text, stopwords=stopwords, stemming=stemming)
    return _tokenize
