"""Static regex tables used by the line filter, fallback matcher and plate extractor."""

import re

# Lines that are nothing but a date, e.g. "12/05/1990"
DATE_LINE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")

# Characters kept on an ID-card line: ASCII letters, digits, whitespace, "." and "-"
ID_LINE_STRIP_RE = re.compile(r"[^A-Za-z0-9\s.\-]")

# Characters kept on a license-plate line before upper-casing
PLATE_LINE_STRIP_RE = re.compile(r"[^A-Z0-9\-\s]")

NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
NON_PLATE_CHAR_RE = re.compile(r"[^A-Z0-9]")
WHITESPACE_RE = re.compile(r"\s+")
REPEATED_HYPHEN_RE = re.compile(r"--+")

# Fallback patterns applied to the space-joined meaningful lines
FALLBACK_NAME_RE = re.compile(r"\b[A-Z][a-z]+\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?\b")
FALLBACK_ID_RE = re.compile(r"\b[A-Z0-9]{8,15}\b")

# Plate templates in priority order: (name, compiled regex)
PLATE_TEMPLATES: list[tuple[str, re.Pattern[str]]] = [
    ("letters_sep_digits", re.compile(r"\b[A-Z]{2,3}[-\s]?[0-9]{2,4}\b")),  # ABC-123
    ("digits_sep_letters", re.compile(r"\b[0-9]{2,3}[-\s]?[A-Z]{2,3}\b")),  # 123-ABC
    ("letters_digits_suffix", re.compile(r"\b[A-Z]{1,2}[0-9]{2,4}[A-Z]?\b")),  # A1234B
    ("digits_letters", re.compile(r"\b[0-9]{1,3}[A-Z]{2,4}\b")),  # 12ABCD
    ("generic", re.compile(r"\b[A-Z0-9]{4,8}\b")),
]

# Structural bonuses on a cleaned plate: (regex, PlateScoringConfig attribute)
PLATE_STRUCTURE_BONUSES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^[A-Z]{2,3}[0-9]{2,4}$"), "letters_digits_bonus"),
    (re.compile(r"^[0-9]{2,3}[A-Z]{2,3}$"), "digits_letters_bonus"),
    (re.compile(r"^[A-Z][0-9]{3,4}$"), "single_letter_bonus"),
]
