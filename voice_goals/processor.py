# ABOUTME: Batch aggregation: tag frequencies plus per-entry deduplicated goals.
# ABOUTME: process_entries() is pure; every accumulator is created per call.

from collections.abc import Mapping, Sequence
from typing import Any

from core.schemas import DetectedGoal, ProcessedResult, VoiceEntry
from voice_goals.patterns import detect_goals


def _as_entry(entry: VoiceEntry | Mapping[str, Any]) -> VoiceEntry:
    if isinstance(entry, VoiceEntry):
        return entry
    return VoiceEntry.model_validate(entry)


def _entry_goals(entry: VoiceEntry) -> list[DetectedGoal]:
    """Goals from transcript_raw then transcript_user, deduped within this entry only."""
    seen_tasks: set[str] = set()
    unique: list[DetectedGoal] = []
    for goal in detect_goals(entry.transcript_raw, entry.id) + detect_goals(
        entry.transcript_user, entry.id
    ):
        key = goal.task_text.lower()
        if key in seen_tasks:
            continue
        seen_tasks.add(key)
        unique.append(goal)
    return unique


def process_entries(
    entries: Sequence[VoiceEntry | Mapping[str, Any]],
) -> ProcessedResult:
    """Analyze a batch of voice entries for goals and tag usage."""
    tag_frequencies: dict[str, int] = {}
    detected_goals: list[DetectedGoal] = []

    for raw_entry in entries:
        entry = _as_entry(raw_entry)
        for tag in entry.tags_user:
            tag_frequencies[tag] = tag_frequencies.get(tag, 0) + 1
        detected_goals.extend(_entry_goals(entry))

    return ProcessedResult(
        summary=f"Analyzed {len(entries)} entries and detected {len(detected_goals)} goals",
        tag_frequencies=tag_frequencies,
        detected_goals=detected_goals,
    )
