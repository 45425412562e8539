"""
Factory to create scorer instances by variant name or configuration.
"""

import logging
from typing import Dict, Optional, Sequence, Type, Union

from ..corpus_index import CorpusIndex, Tokenizer
from ..errors import UnknownVariantError
from ..settings import ScorerSettings, load_settings
from .base import BM25Scorer
from .bm25l import BM25L
from .bm25plus import BM25Plus
from .okapi import OkapiBM25

logger = logging.getLogger(__name__)

VARIANTS: Dict[str, Type[BM25Scorer]] = {
    OkapiBM25.name: OkapiBM25,
    BM25L.name: BM25L,
    BM25Plus.name: BM25Plus,
}


def create_scorer(
    variant: str,
    corpus: Union[Sequence[str], CorpusIndex],
    tokenizer: Optional[Tokenizer] = None,
    **params,
) -> BM25Scorer:
    """
    Create a scorer by variant name.

    Args:
        variant: "okapi" | "bm25l" | "bm25plus" (case-insensitive)
        corpus: Raw document texts or a shared CorpusIndex
        tokenizer: Required unless corpus is a CorpusIndex
        **params: k1, b, delta (bm25l, bm25plus), logger, ubiquitous_idf

    Raises:
        UnknownVariantError: variant is not registered
    """
    key = (variant or "").lower()
    scorer_class = VARIANTS.get(key)
    if scorer_class is None:
        raise UnknownVariantError(variant, sorted(VARIANTS))

    if scorer_class is OkapiBM25 and "delta" in params:
        logger.debug(f"Ignoring delta for variant {key}")
        params.pop("delta")

    return scorer_class(corpus, tokenizer, **params)


class ScorerFactory:
    """Factory to create scorers from ScorerSettings (env-configured by default)."""

    @classmethod
    def create(
        cls,
        corpus: Union[Sequence[str], CorpusIndex],
        tokenizer: Optional[Tokenizer] = None,
        settings: Optional[ScorerSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> BM25Scorer:
        """
        Create scorer based on configuration.

        Config (env vars, when settings is None):
            BM25_VARIANT, BM25_K1, BM25_B, BM25_DELTA, BM25_UBIQUITOUS_IDF

        Args:
            corpus: Raw document texts or a shared CorpusIndex
            tokenizer: Required unless corpus is a CorpusIndex
            settings: Explicit configuration (skips the environment)
            logger: Diagnostic sink passed through to the scorer

        A shared CorpusIndex keeps its own ubiquitous_idf policy unless
        settings set one explicitly; a conflicting explicit policy raises
        IDFPolicyMismatchError.
        """
        if settings is None:
            settings = load_settings()

        params = {
            "k1": settings.k1,
            "b": settings.b,
            "logger": logger,
        }
        if not isinstance(corpus, CorpusIndex) or "ubiquitous_idf" in settings.model_fields_set:
            params["ubiquitous_idf"] = settings.ubiquitous_idf
        if settings.variant == BM25Plus.name:
            params["delta"] = settings.delta

        factory_logger = logging.getLogger(__name__)
        factory_logger.info(f"Creating {settings.variant} scorer (k1={settings.k1}, b={settings.b})")
        try:
            return create_scorer(settings.variant, corpus, tokenizer, **params)
        except Exception as e:
            factory_logger.error(f"Failed to create scorer ({settings.variant}): {e}")
            raise
