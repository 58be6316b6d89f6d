# ABOUTME: Pytest tests for detect_goals: trigger groups, ordering, dedup and deadline splitting.
# ABOUTME: Each test scans a single transcript; batch behavior lives in test_processor.py.

import pytest

from core.schemas import GoalStatus
from voice_goals.patterns import detect_goals


def test_detect_verb_intention_with_trailing_deadline():
    goals = detect_goals("I want to learn Spanish before our trip to Madrid", "1")
    assert len(goals) == 1
    goal = goals[0]
    assert goal.task_text == "learn Spanish"
    assert goal.due_date == "our trip to Madrid"
    assert goal.category == "education"
    assert goal.status == GoalStatus.PENDING
    assert goal.source_entry_id == "1"
    assert goal.confidence == 1.0


def test_detect_keeps_phrase_whole_when_transcript_has_a_due_date():
    goals = detect_goals("I need to finish my report by tomorrow", "e1")
    assert [g.task_text for g in goals] == ["finish my report by tomorrow"]
    assert goals[0].due_date == "tomorrow"


def test_detect_modal_obligation_stops_at_comma():
    goals = detect_goals(
        "I should sleep earlier, but I always end up scrolling late into the night", "5"
    )
    assert len(goals) == 1
    assert goals[0].task_text == "sleep earlier"
    assert goals[0].due_date is None
    assert goals[0].category == "health"


def test_detect_pattern_order_then_match_order():
    """'going to' (verb trigger) is found before the time-anchored trigger."""
    goals = detect_goals("Tomorrow I'm going to the dentist in the morning", "2")
    assert [g.task_text for g in goals] == [
        "the dentist in the morning",
        "going to the dentist in the morning",
    ]
    assert all(g.category == "health" for g in goals)
    assert all(g.due_date is None for g in goals)


def test_detect_multiple_matches_of_one_pattern_in_text_order():
    goals = detect_goals("I want to read more. I hope to travel!", "x")
    assert [g.task_text for g in goals] == ["read more", "travel"]


def test_detect_dedupes_case_insensitively_within_one_transcript():
    goals = detect_goals("I need to rest. I NEED TO REST.", "x")
    assert [g.task_text for g in goals] == ["rest"]


def test_detect_deadline_compound_prefers_phrase_before_auxiliary():
    goals = detect_goals("Before Friday I'll send the invoice", "x")
    assert [g.task_text for g in goals] == ["Friday"]


def test_detect_deadline_compound_falls_back_to_second_phrase():
    goals = detect_goals("by   I will finish it", "x")
    assert [g.task_text for g in goals] == ["finish it"]


def test_detect_discards_whitespace_only_phrase():
    assert detect_goals("I want to   .", "x") == []


@pytest.mark.parametrize(
    "transcript",
    ["", "Just had a great day at the beach", "Nothing planned."],
)
def test_detect_no_goals(transcript):
    assert detect_goals(transcript, "x") == []


def test_detect_splits_on_until_and_by():
    goals = detect_goals("I need to finish this certification course by July.", "6")
    assert goals[0].task_text == "finish this certification course"
    assert goals[0].due_date == "July"
    assert goals[0].category == "career"


def test_detect_confidence_in_unit_interval():
    text = (
        "I have to finish my presentation slides by Friday, and I must call mom. "
        "Tonight I'll rest. I plan to save money before next year"
    )
    goals = detect_goals(text, "x")
    assert goals
    for g in goals:
        assert 0.0 <= g.confidence <= 1.0
        assert g.status == GoalStatus.PENDING
