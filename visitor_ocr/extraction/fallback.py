"""Regex fallback for ID-card fields the scorers could not settle.

Only consulted when scoring left the name or the ID number unset. The
meaningful lines are joined with spaces and the first match wins.
"""

from .patterns import FALLBACK_ID_RE, FALLBACK_NAME_RE


def match_name(text: str) -> str | None:
    """Return the first run of two or three capitalized words in ``text``."""
    match = FALLBACK_NAME_RE.search(text)
    return match.group(0) if match else None


def match_id_number(text: str) -> str | None:
    """Return the first 8-15 character run of upper-case letters and digits."""
    match = FALLBACK_ID_RE.search(text)
    return match.group(0) if match else None
