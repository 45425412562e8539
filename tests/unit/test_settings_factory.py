"""
Unit tests for environment settings and scorer factories.
"""

import logging

import pytest
from pydantic import ValidationError

from bm25_variants import (
    BM25L,
    BM25Plus,
    CorpusIndex,
    IDFPolicyMismatchError,
    InvalidK1Error,
    OkapiBM25,
    ScorerFactory,
    ScorerSettings,
    UnknownVariantError,
    create_scorer,
    load_settings,
)
from bm25_variants.settings import load_env_files

pytestmark = pytest.mark.unit


class TestScorerSettings:
    """Test the settings model"""

    def test_defaults(self):
        """Test defaults match the scorer constructors"""
        settings = ScorerSettings()
        assert settings.variant == "okapi"
        assert settings.k1 == 1.2
        assert settings.b == 0.75
        assert settings.delta == 1.0
        assert settings.ubiquitous_idf == "clamp"
        assert settings.console_level == logging.INFO

    def test_frozen(self):
        """Test settings are immutable once loaded"""
        settings = ScorerSettings()
        with pytest.raises(ValidationError):
            settings.k1 = 2.0

    def test_unknown_variant(self):
        """Test that only registered variant names validate"""
        with pytest.raises(ValidationError):
            ScorerSettings(variant="bm25f")

    def test_console_level(self):
        """Test that level names map to logging levels"""
        assert ScorerSettings(log_level="DEBUG").console_level == logging.DEBUG
        assert ScorerSettings(log_level="ERROR").console_level == logging.ERROR

    @pytest.mark.parametrize("level", ["chatty", "basic_format", "debug"])
    def test_unknown_log_level(self, level):
        """Test that only standard upper-case level names validate"""
        with pytest.raises(ValidationError):
            ScorerSettings(log_level=level)


class TestLoadSettings:
    """Test reading configuration from the environment"""

    def test_no_env(self):
        """Test that an empty environment gives defaults"""
        assert load_settings(load_files=False) == ScorerSettings()

    def test_env_values(self, monkeypatch):
        """Test parsing of every variable"""
        monkeypatch.setenv("BM25_VARIANT", "BM25Plus")
        monkeypatch.setenv("BM25_K1", "1.5")
        monkeypatch.setenv("BM25_B", "0.5")
        monkeypatch.setenv("BM25_DELTA", "0.25")
        monkeypatch.setenv("BM25_UBIQUITOUS_IDF", "Legacy")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = load_settings(load_files=False)

        assert settings.variant == "bm25plus"
        assert settings.k1 == 1.5
        assert settings.b == 0.5
        assert settings.delta == 0.25
        assert settings.ubiquitous_idf == "legacy"
        assert settings.console_level == logging.DEBUG

    def test_blank_values_ignored(self, monkeypatch):
        """Test that empty variables fall back to defaults"""
        monkeypatch.setenv("BM25_K1", "   ")
        assert load_settings(load_files=False).k1 == 1.2

    def test_unparseable_number(self, monkeypatch):
        """Test that a non-numeric k1 fails validation"""
        monkeypatch.setenv("BM25_K1", "abc")
        with pytest.raises(ValidationError):
            load_settings(load_files=False)

    def test_unknown_variant(self, monkeypatch):
        """Test that a bad variant name fails validation"""
        monkeypatch.setenv("BM25_VARIANT", "tfidf")
        with pytest.raises(ValidationError):
            load_settings(load_files=False)

    def test_log_level_case_insensitive(self, monkeypatch):
        """Test that LOG_LEVEL is normalized to upper case"""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert load_settings(load_files=False).console_level == logging.WARNING

    def test_unknown_log_level(self, monkeypatch):
        """Test that a non-level LOG_LEVEL fails validation"""
        monkeypatch.setenv("LOG_LEVEL", "basic_format")
        with pytest.raises(ValidationError):
            load_settings(load_files=False)


class TestEnvFiles:
    """Test .env.local / .env loading"""

    def test_env_file(self, tmp_path):
        """Test that .env is read when present"""
        (tmp_path / ".env").write_text("BM25_VARIANT=bm25l\nBM25_K1=2.0\n")

        settings = load_settings(base_dir=tmp_path)

        assert settings.variant == "bm25l"
        assert settings.k1 == 2.0

    def test_env_local_takes_priority(self, tmp_path):
        """Test that .env.local is loaded instead of .env"""
        (tmp_path / ".env").write_text("BM25_VARIANT=bm25l\n")
        (tmp_path / ".env.local").write_text("BM25_VARIANT=bm25plus\n")

        assert load_env_files(tmp_path) == tmp_path / ".env.local"
        assert load_settings(base_dir=tmp_path, load_files=False).variant == "bm25plus"

    def test_no_files(self, tmp_path):
        """Test that a directory without env files changes nothing"""
        assert load_env_files(tmp_path) is None
        assert load_settings(base_dir=tmp_path) == ScorerSettings()


class TestCreateScorer:
    """Test construction by variant name"""

    @pytest.mark.parametrize("name,expected", [
        ("okapi", OkapiBM25),
        ("bm25l", BM25L),
        ("bm25plus", BM25Plus),
        ("BM25Plus", BM25Plus),
    ])
    def test_known_variants(self, small_corpus, tokenizer, name, expected):
        """Test that names map to classes, case-insensitively"""
        scorer = create_scorer(name, small_corpus, tokenizer)
        assert type(scorer) is expected

    def test_unknown_variant(self, small_corpus, tokenizer):
        """Test that the error lists the registered names"""
        with pytest.raises(UnknownVariantError) as exc_info:
            create_scorer("bm25f", small_corpus, tokenizer)
        assert "bm25plus" in str(exc_info.value)

    def test_params_forwarded(self, small_corpus, tokenizer):
        """Test k1, b and delta reach the scorer"""
        scorer = create_scorer("bm25plus", small_corpus, tokenizer, k1=1.5, b=0.5, delta=0.5)
        assert scorer.get_params() == {"variant": "bm25plus", "k1": 1.5, "b": 0.5, "delta": 0.5}

    def test_okapi_ignores_delta(self, small_corpus, tokenizer):
        """Test that a delta meant for other variants does not break Okapi"""
        scorer = create_scorer("okapi", small_corpus, tokenizer, delta=0.5)
        assert "delta" not in scorer.get_params()

    def test_invalid_params_propagate(self, small_corpus, tokenizer):
        """Test that scorer validation errors are not masked"""
        with pytest.raises(InvalidK1Error):
            create_scorer("okapi", small_corpus, tokenizer, k1=-1.0)

    def test_shared_index(self, small_index):
        """Test that a prebuilt index needs no tokenizer"""
        scorer = create_scorer("bm25l", small_index)
        assert scorer.index is small_index


class TestScorerFactory:
    """Test construction from settings"""

    def test_explicit_settings(self, small_corpus, tokenizer):
        """Test that explicit settings drive the variant and parameters"""
        settings = ScorerSettings(variant="bm25plus", k1=1.5, b=0.5, delta=0.25)
        scorer = ScorerFactory.create(small_corpus, tokenizer, settings=settings)

        assert isinstance(scorer, BM25Plus)
        assert scorer.get_params() == {"variant": "bm25plus", "k1": 1.5, "b": 0.5, "delta": 0.25}

    def test_delta_not_forwarded_to_bm25l(self, small_corpus, tokenizer):
        """Test that BM25_DELTA configures the BM25+ floor only"""
        settings = ScorerSettings(variant="bm25l", delta=1.0)
        scorer = ScorerFactory.create(small_corpus, tokenizer, settings=settings)
        assert scorer.delta == 0.0

    def test_from_environment(self, small_corpus, tokenizer, tmp_path, monkeypatch):
        """Test that missing settings are read from the environment"""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BM25_VARIANT", "bm25l")
        monkeypatch.setenv("BM25_UBIQUITOUS_IDF", "legacy")

        scorer = ScorerFactory.create(small_corpus, tokenizer)

        assert isinstance(scorer, BM25L)
        assert scorer.index.ubiquitous_idf == "legacy"

    def test_defaults(self, small_corpus, tokenizer, tmp_path, monkeypatch):
        """Test that an unconfigured environment gives Okapi"""
        monkeypatch.chdir(tmp_path)
        assert isinstance(ScorerFactory.create(small_corpus, tokenizer), OkapiBM25)

    def test_logs_failures(self, small_corpus, tokenizer, caplog):
        """Test that construction errors are logged and re-raised"""
        settings = ScorerSettings(k1=-1.0)
        with pytest.raises(InvalidK1Error):
            ScorerFactory.create(small_corpus, tokenizer, settings=settings)
        assert "Failed to create scorer (okapi)" in caplog.text

    def test_shared_index(self, small_corpus, tokenizer):
        """Test that a CorpusIndex can be passed in place of raw documents"""
        index = CorpusIndex(small_corpus, tokenizer)
        scorer = ScorerFactory.create(index, settings=ScorerSettings())
        assert scorer.index is index

    def test_shared_index_keeps_its_policy(self):
        """Test that unset ubiquitous_idf defers to the index policy"""
        index = CorpusIndex(["common a", "common b"], str.split, ubiquitous_idf="legacy")
        scorer = ScorerFactory.create(index, settings=ScorerSettings(variant="bm25plus"))
        assert scorer.idf("common") < 0.0

    def test_shared_index_matching_policy(self):
        """Test that an explicit policy equal to the index policy is accepted"""
        index = CorpusIndex(["common a", "common b"], str.split, ubiquitous_idf="legacy")
        scorer = ScorerFactory.create(index, settings=ScorerSettings(ubiquitous_idf="legacy"))
        assert scorer.idf("common") < 0.0

    def test_shared_index_conflicting_policy(self):
        """Test that an explicit policy the index was not built with is rejected"""
        index = CorpusIndex(["common a", "common b"], str.split)
        with pytest.raises(IDFPolicyMismatchError) as exc_info:
            ScorerFactory.create(index, settings=ScorerSettings(ubiquitous_idf="legacy"))
        assert exc_info.value.requested == "legacy"
        assert exc_info.value.index_policy == "clamp"

    def test_shared_index_conflicting_env_policy(self, tmp_path, monkeypatch):
        """Test that BM25_UBIQUITOUS_IDF is checked against a shared index"""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BM25_UBIQUITOUS_IDF", "legacy")
        index = CorpusIndex(["common a", "common b"], str.split)
        with pytest.raises(IDFPolicyMismatchError):
            ScorerFactory.create(index)
