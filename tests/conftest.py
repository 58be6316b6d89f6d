# ABOUTME: Pytest hooks and shared fixtures. Pins config env vars before app/config load.
# ABOUTME: make_entry builds VoiceEntry-shaped dicts with the same text in both transcripts.

import os

import pytest

# core.config reads these at import; keep tests independent of a local .env.
os.environ.setdefault("CORS_ORIGINS", "http://localhost:8501")
os.environ.setdefault("API_URL", "http://localhost:8000")


def _entry(
    entry_id: str,
    transcript: str,
    tags: list[str] | None = None,
    transcript_user: str | None = None,
) -> dict:
    return {
        "id": entry_id,
        "user_id": "user1",
        "audio_url": None,
        "transcript_raw": transcript,
        "transcript_user": transcript if transcript_user is None else transcript_user,
        "language_detected": "en",
        "language_rendered": "en",
        "tags_model": [],
        "tags_user": list(tags or []),
        "category": None,
        "created_at": "2024-03-20T10:00:00Z",
        "updated_at": "2024-03-20T10:00:00Z",
        "emotion_score_score": 0.5,
        "embedding": None,
    }


@pytest.fixture
def make_entry():
    """Factory for entry dicts shaped like the product's voice entry record."""
    return _entry
