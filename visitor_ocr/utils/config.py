"""Configuration management for the visitor OCR system.

Loads and validates YAML configuration with sensible defaults for image
preprocessing, the OCR engine, and the field-scoring heuristics.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_BOILERPLATE_KEYWORDS: list[str] = [
    "IDENTITY",
    "CARD",
    "GOVERNMENT",
    "REPUBLIC",
    "ISSUED",
    "EXPIRES",
    "DOB",
    "DATE",
    "SEX",
    "MALE",
    "FEMALE",
    "ADDRESS",
    "SIGNATURE",
    "VALID",
]


class PreprocessingConfig(BaseModel):
    """Configuration for image preprocessing before OCR."""

    enabled: bool = True
    upscale_min_height: int = 400
    denoise_enabled: bool = True
    denoise_method: str = "bilateral"
    contrast_enabled: bool = True
    clahe_clip_limit: float = 2.0
    clahe_tile_size: int = 8
    binarize_enabled: bool = False
    binarize_method: str = "otsu"


class OCRConfig(BaseModel):
    """Configuration for the Tesseract OCR engine."""

    tesseract_cmd: str | None = None
    default_lang: str = "eng"
    psm: int = 3


class LineFilterConfig(BaseModel):
    """Rules deciding which OCR lines of an ID card are worth scoring."""

    min_length: int = 3
    max_length: int = 50
    boilerplate_keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BOILERPLATE_KEYWORDS)
    )


class NameScoringConfig(BaseModel):
    """Weights for rating how much a line looks like a person's name."""

    alpha_weight: float = 0.4
    word_count_bonus: float = 0.3
    min_words: int = 2
    max_words: int = 4
    capitalized_weight: float = 0.2
    length_bonus: float = 0.1
    min_length: int = 5
    max_length: int = 40
    threshold: float = 0.7


class IDScoringConfig(BaseModel):
    """Weights for rating how much a line looks like an ID number."""

    digit_bonus: float = 0.4
    mixed_bonus: float = 0.2
    alnum_weight: float = 0.3
    length_bonus: float = 0.1
    min_length: int = 6
    max_length: int = 15
    threshold: float = 0.6


class PlateScoringConfig(BaseModel):
    """Weights for rating how much a string looks like a license plate."""

    mixed_bonus: float = 0.5
    numeric_bonus: float = 0.3
    numeric_min_length: int = 3
    typical_length_bonus: float = 0.3
    typical_min_length: int = 4
    typical_max_length: int = 8
    loose_length_bonus: float = 0.1
    loose_min_length: int = 3
    loose_max_length: int = 10
    letters_digits_bonus: float = 0.2
    digits_letters_bonus: float = 0.2
    single_letter_bonus: float = 0.15
    min_line_length: int = 3
    fallback_min_length: int = 4
    fallback_max_length: int = 10
    fallback_threshold: float = 0.5


class ExtractionConfig(BaseModel):
    """Configuration for the text-to-field extraction heuristics."""

    line_filter: LineFilterConfig = Field(default_factory=LineFilterConfig)
    name: NameScoringConfig = Field(default_factory=NameScoringConfig)
    id_number: IDScoringConfig = Field(default_factory=IDScoringConfig)
    plate: PlateScoringConfig = Field(default_factory=PlateScoringConfig)


class AppConfig(BaseModel):
    """Top-level application configuration."""

    preprocessing: PreprocessingConfig = Field(default_factory=PreprocessingConfig)
    ocr: OCRConfig = Field(default_factory=OCRConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
