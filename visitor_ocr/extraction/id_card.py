"""ID-card field extraction from raw OCR text.

Combines the noise filter, the name and ID-number scorers and the regex
fallback into a single best-effort result.
"""

import logging
from dataclasses import dataclass
from functools import partial

from visitor_ocr.utils.config import ExtractionConfig
from visitor_ocr.utils.logger import get_logger, resolve_logger

from .fallback import match_id_number, match_name
from .lines import meaningful_lines
from .patterns import NON_ALNUM_RE, WHITESPACE_RE
from .scoring import best_candidate, id_score, name_score

logger = get_logger(__name__)


@dataclass
class ExtractedIDData:
    """Fields recognized on an ID card. ``None`` means not confidently found."""

    name: str | None = None
    id_number: str | None = None
    address: str | None = None
    city: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Return only the populated fields, keyed the way the forms expect."""
        values = {
            "name": self.name,
            "idNumber": self.id_number,
            "address": self.address,
            "city": self.city,
        }
        return {key: value for key, value in values.items() if value}


class IDCardExtractor:
    """Extracts a person's name and ID number from ID-card OCR text.

    The line chosen as the name is never reused as the ID number, even when
    it is also the strongest ID candidate. A layout that puts both on one
    line therefore loses the ID number unless the fallback finds another.

    Args:
        config: Extraction configuration with filter rules and weights.
        log: Logger for diagnostics. Defaults to the module logger.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.log = resolve_logger(log, logger)

    def extract(self, raw_text: str) -> ExtractedIDData:
        """Run the full ID-card pipeline over one OCR result.

        Args:
            raw_text: Unprocessed OCR text of one ID-card image.

        Returns:
            Extracted fields. Empty when nothing usable was found.
        """
        lines = meaningful_lines(raw_text, self.config.line_filter)
        self.log.debug("Meaningful ID-card lines: %s", lines)

        result = ExtractedIDData()
        if not lines:
            return result

        name = best_candidate(
            lines,
            partial(name_score, config=self.config.name),
            self.config.name.threshold,
        )
        if name:
            result.name = WHITESPACE_RE.sub(" ", name.text).strip()
            self.log.info("Name candidate %r (score=%.2f)", result.name, name.score)

        id_candidate = best_candidate(
            lines,
            partial(id_score, config=self.config.id_number),
            self.config.id_number.threshold,
            exclude=name.text if name else None,
        )
        if id_candidate:
            result.id_number = NON_ALNUM_RE.sub("", id_candidate.text)
            self.log.info(
                "ID number candidate %r (score=%.2f)",
                result.id_number,
                id_candidate.score,
            )

        if not result.name or not result.id_number:
            self._apply_fallback(result, " ".join(lines))

        return result

    def _apply_fallback(self, result: ExtractedIDData, text: str) -> None:
        """Fill unset fields from regex matches over the joined lines."""
        if not result.name:
            result.name = match_name(text)
            if result.name:
                self.log.info("Name found by fallback pattern: %r", result.name)
        if not result.id_number:
            result.id_number = match_id_number(text)
            if result.id_number:
                self.log.info(
                    "ID number found by fallback pattern: %r", result.id_number
                )
