# ABOUTME: Pydantic models for the analysis contract (VoiceEntry in, ProcessedResult out).
# ABOUTME: Used by the voice_goals engine and as FastAPI request/response bodies.

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GoalStatus(str, Enum):
    """Lifecycle of a detected goal. Detection only ever produces PENDING."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class VoiceEntry(BaseModel):
    """One transcribed voice note. Only the transcripts and user tags are analyzed."""

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    id: str
    transcript_raw: str
    transcript_user: str
    tags_user: list[str]
    user_id: str | None = None
    audio_url: str | None = None
    language_detected: str | None = None
    language_rendered: str | None = None
    tags_model: list[str] = Field(default_factory=list)
    category: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    emotion_score_score: float | None = None
    embedding: list[float] | None = None


class DetectedGoal(BaseModel):
    """A goal or intention found in a transcript."""

    model_config = ConfigDict(frozen=True)

    task_text: str = Field(min_length=1, description="The extracted task phrase, trimmed.")
    due_date: str | None = Field(
        default=None, description="Deadline expression found in the transcript."
    )
    status: GoalStatus = GoalStatus.PENDING
    category: str | None = Field(
        default=None,
        description="One of health, career, education, personal, finance.",
    )
    confidence: float = Field(
        description="Heuristic confidence that the match is a genuine goal.",
        ge=0.0,
        le=1.0,
    )
    source_entry_id: str


class ProcessedResult(BaseModel):
    """Batch analysis output. Serialized with camelCase keys on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    tag_frequencies: dict[str, int] = Field(
        default_factory=dict, alias="tagFrequencies"
    )
    detected_goals: list[DetectedGoal] = Field(
        default_factory=list, alias="detectedGoals"
    )
