"""
Scorer configuration from environment variables.

Variables (all optional):
    BM25_VARIANT: "okapi" | "bm25l" | "bm25plus" (default: okapi)
    BM25_K1: term frequency saturation (default: 1.2)
    BM25_B: length normalization (default: 0.75)
    BM25_DELTA: BM25+ floor per matched term (default: 1.0)
    BM25_UBIQUITOUS_IDF: "clamp" | "legacy" (default: clamp)
    LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL, console level
        for setup_logging(settings=...) (default: INFO)

Values are read from the process environment after loading .env.local
(local dev, highest priority) or .env from the working directory.
Range checks on k1/b/delta are left to the scorers.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ScorerSettings(BaseModel):
    """Validated scorer configuration"""

    model_config = ConfigDict(frozen=True)

    variant: Literal["okapi", "bm25l", "bm25plus"] = Field(
        default="okapi", description="BM25 variant to construct"
    )
    k1: float = Field(default=1.2, description="Term frequency saturation")
    b: float = Field(default=0.75, description="Length normalization")
    delta: float = Field(default=1.0, description="BM25+ floor per matched term")
    ubiquitous_idf: Literal["clamp", "legacy"] = Field(
        default="clamp", description="IDF for terms present in every document"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Console log level for setup_logging"
    )

    @property
    def console_level(self) -> int:
        """Numeric log_level, as applied by setup_logging(settings=...)"""
        return logging.getLevelName(self.log_level)


def load_env_files(base_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Load .env.local (first) or .env into os.environ.

    Returns:
        Path of the loaded file, or None when neither exists
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    env_local = base / ".env.local"
    env_file = base / ".env"

    if env_local.exists():
        logger.info(f"Loading environment from: {env_local}")
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        logger.info(f"Loading environment from: {env_file}")
        load_dotenv(env_file, override=True)
        return env_file

    logger.debug("No .env.local or .env file found - using system environment variables only")
    return None


def load_settings(base_dir: Optional[Union[str, Path]] = None, load_files: bool = True) -> ScorerSettings:
    """
    Build ScorerSettings from the environment.

    Args:
        base_dir: Directory holding .env.local/.env (default: cwd)
        load_files: Set False to read os.environ only

    Raises:
        pydantic.ValidationError: a value cannot be parsed or is not an allowed option
    """
    if load_files:
        load_env_files(base_dir)

    values = {}
    env_map = {
        "variant": "BM25_VARIANT",
        "k1": "BM25_K1",
        "b": "BM25_B",
        "delta": "BM25_DELTA",
        "ubiquitous_idf": "BM25_UBIQUITOUS_IDF",
        "log_level": "LOG_LEVEL",
    }
    for field, env_name in env_map.items():
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        raw = raw.strip()
        if field in ("variant", "ubiquitous_idf"):
            raw = raw.lower()
        elif field == "log_level":
            raw = raw.upper()
        values[field] = raw

    settings = ScorerSettings(**values)
    logger.debug(f"Scorer settings: {settings.model_dump()}")
    return settings
