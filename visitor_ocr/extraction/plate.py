"""License-plate number extraction from raw OCR text.

Plates skip the ID-card noise filter: every line is reduced to plate
characters and searched with the ordered template table. The single best
scoring match across all lines and templates wins.
"""

import logging
from dataclasses import dataclass

from visitor_ocr.utils.config import PlateScoringConfig
from visitor_ocr.utils.logger import get_logger, resolve_logger

from .lines import clean_plate_line, split_lines
from .patterns import (
    NON_PLATE_CHAR_RE,
    PLATE_TEMPLATES,
    REPEATED_HYPHEN_RE,
    WHITESPACE_RE,
)
from .scoring import Candidate, plate_score

logger = get_logger(__name__)


@dataclass
class ExtractedPlateData:
    """Plate number recognized on a vehicle image, if any."""

    plate_number: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Return ``{"plateNumber": ...}`` or an empty dict."""
        return {"plateNumber": self.plate_number} if self.plate_number else {}


def format_plate(candidate: str) -> str:
    """Drop whitespace and collapse repeated hyphens."""
    return REPEATED_HYPHEN_RE.sub("-", WHITESPACE_RE.sub("", candidate))


class PlateExtractor:
    """Finds the most plate-like substring in license-plate OCR text.

    Args:
        config: Plate scoring weights and fallback limits.
        log: Logger for diagnostics. Defaults to the module logger.
    """

    def __init__(
        self,
        config: PlateScoringConfig | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.config = config or PlateScoringConfig()
        self.log = resolve_logger(log, logger)

    def extract(self, raw_text: str) -> ExtractedPlateData:
        """Run template matching and fallback over one OCR result.

        Args:
            raw_text: Unprocessed OCR text of one plate image.

        Returns:
            Extracted plate. Empty when nothing plate-like was found.
        """
        lines = split_lines(raw_text)
        self.log.debug("License plate OCR lines: %s", lines)

        best = self.best_template_match(lines) or self._fallback(lines)
        if best is None:
            return ExtractedPlateData()

        plate = format_plate(best.text)
        self.log.info("Plate candidate %r (score=%.2f)", plate, best.score)
        return ExtractedPlateData(plate_number=plate)

    def best_template_match(self, lines: list[str]) -> Candidate | None:
        """Score every template match on every line and keep the best.

        Templates are tried in priority order and lines in source order; a
        later match must score strictly higher to replace the current best.
        """
        best: Candidate | None = None
        for line in lines:
            clean = clean_plate_line(line)
            if len(clean) < self.config.min_line_length:
                continue
            for name, pattern in PLATE_TEMPLATES:
                for match in pattern.finditer(clean):
                    score = plate_score(match.group(0), self.config)
                    if score > 0 and (best is None or score > best.score):
                        self.log.debug(
                            "Template %s matched %r (score=%.2f)",
                            name,
                            match.group(0),
                            score,
                        )
                        best = Candidate(text=match.group(0), score=score)
        return best

    def _fallback(self, lines: list[str]) -> Candidate | None:
        """Treat all the text as one plate when no template matched."""
        joined = NON_PLATE_CHAR_RE.sub("", " ".join(lines)).upper()
        cfg = self.config
        if not cfg.fallback_min_length <= len(joined) <= cfg.fallback_max_length:
            return None
        score = plate_score(joined, cfg)
        if score > cfg.fallback_threshold:
            return Candidate(text=joined, score=score)
        return None
