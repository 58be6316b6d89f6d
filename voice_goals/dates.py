# ABOUTME: Due-date extraction from a transcript using a fixed, ordered list of patterns.
# ABOUTME: extract_due_date() returns the first pattern's captured text unchanged, or None.

import re

_DAY_OR_DATE = r"(tomorrow|next week|this weekend|today|tonight|[0-9]{1,2}/[0-9]{1,2}/[0-9]{4})"

# Order matters: the first pattern that matches anywhere wins.
# The last pattern is deliberately case-sensitive.
DUE_DATE_PATTERNS = (
    re.compile(r"(?:by|before|until|on) " + _DAY_OR_DATE, re.IGNORECASE),
    re.compile(r"(?:due|deadline) (?:is|on) " + _DAY_OR_DATE, re.IGNORECASE),
    re.compile(
        r"(?:by|before|until) (?:the end of )?(this|next) (week|month|year)",
        re.IGNORECASE,
    ),
    re.compile(r"(?:by|before|until) (?:the )?(first|second|third|fourth|last) (week|month)"),
)


def extract_due_date(transcript: str) -> str | None:
    """Return the first due-date expression found in the transcript, or None."""
    for pattern in DUE_DATE_PATTERNS:
        match = pattern.search(transcript)
        if match:
            return match.group(1)
    return None
