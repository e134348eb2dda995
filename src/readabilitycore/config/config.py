"""
Configuration management for the readability engine using Pydantic.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, ClassVar, Dict, Literal, Optional, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class ScoreCoefficients(BaseModel):
    """
    Weights of the unified reading-ease formula for one language.

    A language uses either the per-word or the per-100-words syllable
    weight; the one it leaves out stays ``None`` and counts as zero.
    """

    model_config = ConfigDict(frozen=True)

    intercept: float = Field(description="Added to the 100-point base.")
    words_per_sentence_weight: float = Field(ge=0)
    syllables_per_word_weight: Optional[float] = Field(default=None, ge=0)
    syllables_per_100_words_weight: Optional[float] = Field(default=None, ge=0)


class SegmentationConfig(BaseModel):
    """Sentence and word segmentation backend."""

    backend: Literal["auto", "nltk", "regex"] = Field(
        default="auto",
        description="'auto' uses NLTK Punkt when its data is installed, otherwise the regex heuristics.",
    )


class SyllableConfig(BaseModel):
    """Syllable counting and memoization."""

    cache_size: int = Field(default=2000, ge=1, description="Maximum number of cached (word, language) counts.")


class AnalysisConfig(BaseModel):
    """Defaults applied to every analysis."""

    complex_threshold: int = Field(default=3, ge=1, description="Syllables at which a word counts as complex.")


class ScoringConfig(BaseModel):
    """Per-language overrides of the built-in coefficient table."""

    coefficients: Dict[str, ScoreCoefficients] = Field(default_factory=dict)

    @field_validator("coefficients", mode="before")
    @classmethod
    def lowercase_languages(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k).strip().lower(): val for k, val in v.items()}
        return v


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class ReadabilityConfig(BaseSettings):
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    syllables: SyllableConfig = Field(default_factory=SyllableConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="READABILITY_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> ReadabilityConfig:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "readability.yaml", current_dir / "readability.yml"):
        if path.exists():
            return path
    return None


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the ReadabilityConfig object that delays loading and
    validation until an attribute is first accessed, so a broken config
    file cannot crash an import.
    """

    _config: ClassVar[ReadabilityConfig | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._config = None

    def _load_config_with_fallback(self) -> ReadabilityConfig:
        """Load configuration from file or fall back to defaults."""
        config_path = find_config_file()
        if config_path:
            try:
                log.info("Lazy loading configuration from: %s", config_path)
                return ReadabilityConfig.from_yaml(config_path)
            except (ValidationError, yaml.YAMLError, OSError) as e:
                log.error(
                    "Failed to load or validate configuration from '%s': %s. "
                    "Falling back to default settings. Please check your config file.",
                    config_path,
                    e,
                    exc_info=log.getEffectiveLevel() <= logging.DEBUG,
                )
        else:
            log.info("No config file found. Using default settings for lazy load.")

        try:
            return ReadabilityConfig()
        except ValidationError as e:
            log.critical("FATAL: Default configuration is invalid: %s", e, exc_info=True)
            raise RuntimeError(f"Default configuration is invalid, cannot start: {e}") from e


# --- Global Settings Instance ---
settings: "ReadabilityConfig" = cast("ReadabilityConfig", LazyConfig())
