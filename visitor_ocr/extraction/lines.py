"""Line normalization and noise filtering for raw OCR text.

OCR output of an ID card interleaves the data of interest with headers,
field labels and dates. This module splits the text into lines and keeps
only the ones worth scoring as a name or ID number.
"""

from visitor_ocr.utils.config import LineFilterConfig

from .patterns import DATE_LINE_RE, ID_LINE_STRIP_RE, PLATE_LINE_STRIP_RE


def split_lines(raw_text: str) -> list[str]:
    """Split raw OCR text into trimmed, non-empty lines in source order."""
    if not raw_text:
        return []
    stripped = (line.strip() for line in raw_text.splitlines())
    return [line for line in stripped if line]


def clean_id_line(line: str) -> str:
    """Remove every character except ASCII letters, digits, whitespace, '.' and '-'."""
    return ID_LINE_STRIP_RE.sub("", line)


def clean_plate_line(line: str) -> str:
    """Reduce a line to plate characters, upper-cased and trimmed.

    Stripping happens before upper-casing, so lower-case OCR noise is dropped
    rather than promoted to plate letters.
    """
    return PLATE_LINE_STRIP_RE.sub("", line).upper().strip()


def is_noise_line(raw_line: str, cleaned: str, config: LineFilterConfig) -> bool:
    """Decide whether an ID-card line is boilerplate, a label, a date or junk.

    Args:
        raw_line: The trimmed line as produced by the OCR engine.
        cleaned: The same line after :func:`clean_id_line`.
        config: Length limits and boilerplate keywords.

    Returns:
        ``True`` if the line must not be considered as a field candidate.
    """
    if len(cleaned) < config.min_length or len(cleaned) > config.max_length:
        return True

    upper = cleaned.upper()
    if any(keyword.upper() in upper for keyword in config.boilerplate_keywords):
        return True

    # Cleaning strips the slashes, so the raw line has to be checked as well
    if DATE_LINE_RE.match(raw_line) or DATE_LINE_RE.match(upper):
        return True

    return not any(ch.isascii() and ch.isalnum() for ch in cleaned)


def meaningful_lines(raw_text: str, config: LineFilterConfig) -> list[str]:
    """Return the cleaned ID-card lines that survive the noise filter.

    Args:
        raw_text: Unprocessed OCR output for one image.
        config: Noise filter configuration.

    Returns:
        Cleaned lines in source order. An empty list means nothing usable.
    """
    result: list[str] = []
    for line in split_lines(raw_text):
        cleaned = clean_id_line(line)
        if not is_noise_line(line, cleaned, config):
            result.append(cleaned)
    return result
