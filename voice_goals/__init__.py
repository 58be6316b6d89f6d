# ABOUTME: Goal detection engine for transcribed voice entries.
# ABOUTME: Use process_entries() for batch analysis; detect_goals() scans a single transcript.

from voice_goals.categories import classify_category
from voice_goals.dates import extract_due_date
from voice_goals.patterns import detect_goals
from voice_goals.processor import process_entries
from voice_goals.scoring import score_confidence

__all__ = [
    "classify_category",
    "detect_goals",
    "extract_due_date",
    "process_entries",
    "score_confidence",
]
