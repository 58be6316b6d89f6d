# ABOUTME: Shared app configuration and constants used across API and UI (core package).
# ABOUTME: Keeps defaults in one place so API and clients stay in sync.

import os

from dotenv import load_dotenv

load_dotenv()

API_URL = os.environ.get("API_URL", "http://localhost:8000")
ANALYZE_PATH = "/entries/analyze"

_DEFAULT_GOAL_LABEL_MAX_CHARS = 80


def _parse_goal_label_max_chars() -> int:
    raw = os.environ.get("GOAL_LABEL_MAX_CHARS", str(_DEFAULT_GOAL_LABEL_MAX_CHARS))
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_GOAL_LABEL_MAX_CHARS
    return value if value > 0 else _DEFAULT_GOAL_LABEL_MAX_CHARS


GOAL_LABEL_MAX_CHARS = _parse_goal_label_max_chars()

# CORS: comma-separated origins; default allows local Streamlit UI. Set in production.
_raw_cors = os.environ.get("CORS_ORIGINS", "http://localhost:8501")
CORS_ORIGINS = [o.strip() for o in _raw_cors.split(",") if o.strip()] or [
    "http://localhost:8501"
]
