# ABOUTME: Keyword-based goal category classification over task phrase + transcript.
# ABOUTME: Categories are checked in declaration order; the first keyword hit wins.

# Declaration order is the tie-break: "certification" resolves to career, not education.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("health", ("exercise", "diet", "sleep", "doctor", "dentist", "fitness", "health")),
    ("career", ("work", "job", "career", "business", "promotion", "certification")),
    ("education", ("learn", "study", "course", "degree", "certification", "language")),
    ("personal", ("relationship", "family", "friends", "social", "hobby")),
    ("finance", ("money", "save", "invest", "budget", "finance")),
)


def classify_category(task_text: str, transcript: str) -> str | None:
    """Return the first category whose keyword appears as a substring, or None."""
    text = f"{task_text} {transcript}".lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return None
