"""Heuristic scorers rating how well a string resembles a target field.

Each scorer is a pure function of its input and a configuration record and
returns a value in ``[0, 1]``. Weights and thresholds come from
:class:`~visitor_ocr.utils.config.ExtractionConfig`.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from visitor_ocr.utils.config import (
    IDScoringConfig,
    NameScoringConfig,
    PlateScoringConfig,
)

from .patterns import NON_ALNUM_RE, NON_PLATE_CHAR_RE, PLATE_STRUCTURE_BONUSES

_LETTER_RE = re.compile(r"[A-Za-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_LETTER_OR_SPACE_RE = re.compile(r"[A-Za-z\s]")
_UPPER_LETTER_RE = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class Candidate:
    """A string proposed as the value of a field, with its score."""

    text: str
    score: float


def _clamp(score: float) -> float:
    return max(0.0, min(score, 1.0))


def name_score(line: str, config: NameScoringConfig | None = None) -> float:
    """Rate how likely a line is to be a person's name.

    Args:
        line: A cleaned OCR line.
        config: Name scoring weights. Defaults to :class:`NameScoringConfig`.

    Returns:
        Score in ``[0, 1]``.
    """
    config = config or NameScoringConfig()
    if not _LETTER_RE.search(line):
        return 0.0

    score = len(_LETTER_OR_SPACE_RE.findall(line)) / len(line) * config.alpha_weight

    words = line.split()
    if config.min_words <= len(words) <= config.max_words:
        score += config.word_count_bonus

    capitalized = [w for w in words if _UPPER_LETTER_RE.match(w)]
    score += len(capitalized) / len(words) * config.capitalized_weight

    if config.min_length <= len(line) <= config.max_length:
        score += config.length_bonus

    return _clamp(score)


def id_score(line: str, config: IDScoringConfig | None = None) -> float:
    """Rate how likely a line is to be an ID number.

    Args:
        line: A cleaned OCR line.
        config: ID scoring weights. Defaults to :class:`IDScoringConfig`.

    Returns:
        Score in ``[0, 1]``.
    """
    config = config or IDScoringConfig()
    has_digits = bool(_DIGIT_RE.search(line))
    has_letters = bool(_LETTER_RE.search(line))
    if not has_digits and not has_letters:
        return 0.0

    score = 0.0
    if has_digits:
        score += config.digit_bonus
    if has_digits and has_letters:
        score += config.mixed_bonus

    alnum = NON_ALNUM_RE.sub("", line)
    score += len(alnum) / len(line) * config.alnum_weight

    if config.min_length <= len(alnum) <= config.max_length:
        score += config.length_bonus

    return _clamp(score)


def plate_score(text: str, config: PlateScoringConfig | None = None) -> float:
    """Rate how likely a string is to be a license plate number.

    The text is reduced to upper-case letters and digits before scoring, so
    separators inside a match do not count against it.

    Args:
        text: A plate template match or the concatenated fallback text.
        config: Plate scoring weights. Defaults to :class:`PlateScoringConfig`.

    Returns:
        Score in ``[0, 1]``.
    """
    config = config or PlateScoringConfig()
    clean = NON_PLATE_CHAR_RE.sub("", text)
    has_digits = bool(_DIGIT_RE.search(clean))
    has_letters = bool(_UPPER_LETTER_RE.search(clean))
    if not has_digits and not has_letters:
        return 0.0

    score = 0.0
    if has_digits and has_letters:
        score += config.mixed_bonus
    elif has_digits and len(clean) >= config.numeric_min_length:
        score += config.numeric_bonus

    if config.typical_min_length <= len(clean) <= config.typical_max_length:
        score += config.typical_length_bonus
    elif config.loose_min_length <= len(clean) <= config.loose_max_length:
        score += config.loose_length_bonus

    for pattern, bonus_name in PLATE_STRUCTURE_BONUSES:
        if pattern.match(clean):
            score += getattr(config, bonus_name)

    return _clamp(score)


def best_candidate(
    lines: Iterable[str],
    scorer: Callable[[str], float],
    threshold: float,
    exclude: str | None = None,
) -> Candidate | None:
    """Pick the highest-scoring line whose score strictly exceeds ``threshold``.

    Ties keep the earliest line. Lines equal to ``exclude`` are skipped.
    """
    best: Candidate | None = None
    for line in lines:
        if exclude is not None and line == exclude:
            continue
        score = scorer(line)
        if score > threshold and (best is None or score > best.score):
            best = Candidate(text=line, score=score)
    return best
