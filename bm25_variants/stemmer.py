"""
English stemming for the reference tokenizer (Snowball via NLTK).

Snowball (Porter2) maps inflected forms onto a shared root so that query
and document terms match across plurals and verb forms:
- "rankings" → "rank"
- "retrieval" → "retriev"
- "documents" → "document"
"""

from functools import lru_cache

from nltk.stem.snowball import SnowballStemmer

# Stateless after construction, safe to share
_stemmer = SnowballStemmer('english')


@lru_cache(maxsize=65536)
def stem(word: str) -> str:
    """
    Stem a single lowercase word.

    Examples:
        >>> stem("rankings")
        'rank'
        >>> stem("documents")
        'document'
    """
    return _stemmer.stem(word)
