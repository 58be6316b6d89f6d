# ABOUTME: Trigger-pattern scan that turns one transcript into DetectedGoal records.
# ABOUTME: detect_goals() applies the four trigger groups in order and dedupes phrases per call.

import re

from core.schemas import DetectedGoal, GoalStatus
from voice_goals.categories import classify_category
from voice_goals.dates import extract_due_date
from voice_goals.scoring import score_confidence

# Each pattern is scanned over the whole transcript, in this order.
GOAL_PATTERNS = (
    # "want to ...", "decided to ..."
    re.compile(
        r"(?:want|need|plan|going|intend|decided|aim|hope) to ([^.,!?]+)",
        re.IGNORECASE,
    ),
    # "should ...", "have to ..."
    re.compile(r"(?:should|must|have to|got to) ([^.,!?]+)", re.IGNORECASE),
    # "tomorrow I'll ..."
    re.compile(
        r"(?:tomorrow|next week|this weekend|today|tonight) (?:I'm|I am|I will|I'll) ([^.,!?]+)",
        re.IGNORECASE,
    ),
    # "by Friday I will ..."; the phrase before the auxiliary is preferred.
    re.compile(
        r"(?:by|before|until) ([^.,!?]+) (?:I will|I'll|I'm going to) ([^.,!?]+)",
        re.IGNORECASE,
    ),
)

_TRAILING_DEADLINE = re.compile(r"\s(?:by|before|until)\s", re.IGNORECASE)


def _task_phrase(match: re.Match) -> str:
    """First capture group that is non-empty after trimming, else ''."""
    for group in match.groups():
        if group and group.strip():
            return group.strip()
    return ""


def _split_trailing_deadline(task_text: str) -> tuple[str, str | None]:
    """Split 'learn Spanish before our trip' into ('learn Spanish', 'our trip')."""
    found = _TRAILING_DEADLINE.search(task_text)
    if found is None:
        return task_text, None
    head = task_text[: found.start()].strip()
    tail = task_text[found.end() :].strip()
    if not head or not tail:
        return task_text, None
    return head, tail


def detect_goals(transcript: str, entry_id: str) -> list[DetectedGoal]:
    """Scan one transcript and return its goals in pattern order, then match order."""
    goals: list[DetectedGoal] = []
    seen_tasks: set[str] = set()
    transcript_due_date = extract_due_date(transcript)

    for pattern in GOAL_PATTERNS:
        for match in pattern.finditer(transcript):
            task_text = _task_phrase(match)
            if not task_text:
                continue
            due_date = transcript_due_date
            if due_date is None:
                task_text, due_date = _split_trailing_deadline(task_text)

            key = task_text.lower()
            if key in seen_tasks:
                continue
            seen_tasks.add(key)

            goals.append(
                DetectedGoal(
                    task_text=task_text,
                    due_date=due_date,
                    status=GoalStatus.PENDING,
                    category=classify_category(task_text, transcript),
                    confidence=score_confidence(match.group(0), transcript),
                    source_entry_id=entry_id,
                )
            )
    return goals
