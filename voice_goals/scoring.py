# ABOUTME: Heuristic confidence score in [0, 1] for a matched goal phrase.
# ABOUTME: Longer and earlier matches score higher; a due date or a category adds a bonus.

from voice_goals.categories import classify_category
from voice_goals.dates import extract_due_date

FULL_CONFIDENCE_MATCH_LENGTH = 20
DUE_DATE_BONUS = 0.2
CATEGORY_BONUS = 0.1


def score_confidence(match_text: str, transcript: str) -> float:
    """Score a matched substring (trigger words included) within its transcript.

    Position is taken from the first occurrence of match_text in the transcript,
    which can be earlier than the match that was actually found.
    """
    if not transcript:
        return 0.0
    index = transcript.find(match_text)
    position = max(index, 0) / len(transcript)

    confidence = min(
        1.0, (len(match_text) / FULL_CONFIDENCE_MATCH_LENGTH) * (1 - position)
    )
    if extract_due_date(transcript):
        confidence += DUE_DATE_BONUS
    if classify_category(match_text, transcript):
        confidence += CATEGORY_BONUS
    return min(1.0, confidence)
