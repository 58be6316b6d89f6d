# ABOUTME: Streamlit UI: Single entry tab (one transcript + tags) and Batch tab (paste JSON entries).
# ABOUTME: Posts to the API's /entries/analyze; API URL configurable via API_URL env.

import json

import requests
import streamlit as st

from core.config import ANALYZE_PATH, API_URL, GOAL_LABEL_MAX_CHARS

SESSION_LAST_RESULT = "last_result"

_SAMPLE_BATCH = json.dumps(
    {
        "entries": [
            {
                "id": "1",
                "transcript_raw": "I want to learn Spanish before our trip to Madrid",
                "transcript_user": "I want to learn Spanish before our trip to Madrid",
                "tags_user": ["language", "travel"],
            }
        ]
    },
    indent=2,
)


def _parse_tags(raw: str | None) -> list[str]:
    """Split comma-separated tags, trimming and dropping empties. Order and repeats are kept."""
    if not raw:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]


def _build_single_entry(transcript: str, tags_raw: str | None, entry_id: str = "1") -> dict:
    """Build one entry dict with the same text in both transcript fields."""
    text = transcript.strip()
    return {
        "id": entry_id,
        "transcript_raw": text,
        "transcript_user": text,
        "tags_user": _parse_tags(tags_raw),
    }


def _parse_batch(raw: str) -> list[dict] | None:
    """Accept a JSON list of entries or {"entries": [...]}; None if neither."""
    try:
        data = json.loads(raw)
    except (ValueError, TypeError):
        return None
    if isinstance(data, dict):
        data = data.get("entries")
    if not isinstance(data, list):
        return None
    return data


def _sorted_tag_frequencies(freqs: dict[str, int]) -> list[tuple[str, int]]:
    """Most frequent tags first; ties broken alphabetically."""
    return sorted(freqs.items(), key=lambda item: (-item[1], item[0]))


def _goal_expander_label(goal: dict, max_chars: int = GOAL_LABEL_MAX_CHARS) -> str:
    """Build expander label: truncated task text, then due date and category when present."""
    text = (goal.get("task_text") or "").strip()
    label = (text[:max_chars] + "…") if len(text) > max_chars else text
    if goal.get("due_date"):
        label += f"  ·  due {goal['due_date']}"
    if goal.get("category"):
        label += f"  ·  {goal['category']}"
    return label


def _safe_json(response: requests.Response):
    """Parse response body as JSON; return dict or empty dict on failure."""
    try:
        return response.json()
    except Exception:
        return {}


def _analyze(entries: list[dict]) -> None:
    """POST entries to the API and store the result in session state, or show the error."""
    with st.spinner("Analyzing entries..."):
        try:
            r = requests.post(
                f"{API_URL}{ANALYZE_PATH}",
                json={"entries": entries},
                timeout=30,
            )
        except requests.RequestException as e:
            st.error(f"Could not reach the API: {e}")
            return
    if r.status_code == 200:
        data = _safe_json(r)
        if not data or "detectedGoals" not in data:
            st.error("Invalid response from server. Please try again.")
            return
        st.session_state[SESSION_LAST_RESULT] = data
    elif r.status_code == 400:
        body = _safe_json(r)
        st.error(body.get("error", r.text or "Invalid input."))
    else:
        body = _safe_json(r)
        st.error(body.get("error", f"Unexpected error: {r.status_code}"))


def _render_result(result: dict) -> None:
    with st.container(border=True):
        st.subheader("Summary")
        st.write(result.get("summary", ""))

        freqs = result.get("tagFrequencies") or {}
        if freqs:
            st.subheader("Tag frequencies")
            st.table(
                [{"tag": tag, "count": count} for tag, count in _sorted_tag_frequencies(freqs)]
            )

    goals = result.get("detectedGoals") or []
    if not goals:
        st.info("No goals detected.")
        return
    st.subheader("Detected goals")
    for g in goals:
        with st.expander(_goal_expander_label(g), expanded=False):
            st.write(g["task_text"])
            st.caption(f"From entry {g.get('source_entry_id')} · status {g.get('status')}")
            st.metric("Confidence", f"{g.get('confidence', 0):.2f}")


def main():
    st.title("Voice Goals")
    st.write("Find goals and intentions in transcribed voice notes and count tag usage.")

    tab_single, tab_batch = st.tabs(["Single entry", "Batch"])

    with tab_single:
        transcript = st.text_area(
            "Transcript",
            placeholder="e.g. I need to finish this certification course by July.",
            height=100,
        )
        tags_raw = st.text_input("Tags (comma-separated)", placeholder="career, education")
        if st.button("Analyze entry", key="analyze_single_btn"):
            if not (transcript and transcript.strip()):
                st.error("Please enter a transcript.")
            else:
                _analyze([_build_single_entry(transcript, tags_raw)])

    with tab_batch:
        raw = st.text_area("Entries JSON", value=_SAMPLE_BATCH, height=240)
        if st.button("Analyze batch", key="analyze_batch_btn"):
            entries = _parse_batch(raw)
            if entries is None:
                st.error('Paste a JSON list of entries or {"entries": [...]}.')
            else:
                _analyze(entries)

    if SESSION_LAST_RESULT in st.session_state:
        st.divider()
        _render_result(st.session_state[SESSION_LAST_RESULT])


if __name__ == "__main__":
    main()
