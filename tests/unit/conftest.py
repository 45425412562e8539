"""Unit test configuration - shared corpora, tokenizers and env isolation"""

import logging

import pytest

from bm25_variants import BM25L, BM25Plus, CorpusIndex, OkapiBM25

SCORER_ENV_VARS = (
    "BM25_VARIANT",
    "BM25_K1",
    "BM25_B",
    "BM25_DELTA",
    "BM25_UBIQUITOUS_IDF",
    "LOG_LEVEL",
)


def split_tokenizer(text):
    """Single-space split (keeps case and punctuation)"""
    return text.split(" ")


@pytest.fixture(autouse=True)
def clean_scorer_env(monkeypatch):
    """
    Remove scorer env vars for every unit test.

    Settings tests set exactly what they need; nothing leaks in from the
    developer's shell.
    """
    for name in SCORER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tokenizer():
    return split_tokenizer


@pytest.fixture
def small_corpus():
    """Two-document corpus: avgdl = 3, doc lengths [2, 4]"""
    return ["hello world", "this is a test"]


@pytest.fixture
def tech_corpus():
    """Documents of varying length sharing some vocabulary"""
    return [
        "kubernetes pod deployment",
        "kubernetes pod deployment rolling update strategy for large clusters with many nodes",
        "postgres index tuning",
        "kubernetes kubernetes kubernetes operator",
        "vector search with postgres",
    ]


@pytest.fixture
def small_index(small_corpus, tokenizer):
    return CorpusIndex(small_corpus, tokenizer)


@pytest.fixture(params=[OkapiBM25, BM25L, BM25Plus], ids=["okapi", "bm25l", "bm25plus"])
def scorer_class(request):
    """Every variant must honor the shared contract"""
    return request.param


@pytest.fixture
def quiet_logger():
    logger = logging.getLogger("bm25_variants.tests")
    logger.setLevel(logging.DEBUG)
    return logger
