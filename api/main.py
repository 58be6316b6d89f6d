# ABOUTME: FastAPI app: POST /entries/analyze runs goal detection and tag counting over a batch.
# ABOUTME: 400 when entries is not a list or an entry is malformed, 500 on unexpected failure.

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.config import ANALYZE_PATH, CORS_ORIGINS
from core.schemas import ProcessedResult, VoiceEntry
from core.telemetry import log_run
from voice_goals import process_entries

INVALID_ENTRIES_MESSAGE = "Invalid input: entries must be an array"
INTERNAL_ERROR_MESSAGE = "Internal server error"

app = FastAPI(title="Voice Goals API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_message(index: int, exc: ValidationError) -> str:
    """Condense a pydantic error into 'Invalid input: entries[<i>].<field>: <msg>'."""
    first = exc.errors()[0]
    location = "".join(f".{part}" for part in first.get("loc", ()))
    return f"Invalid input: entries[{index}]{location}: {first.get('msg', 'invalid value')}"


def _run_analysis(entries: list[VoiceEntry]) -> ProcessedResult:
    """Run the engine over validated entries and log telemetry for the run."""
    start = time.perf_counter()
    try:
        result = process_entries(entries)
    except Exception:
        log_run(
            latency_ms=(time.perf_counter() - start) * 1000,
            entry_count=len(entries),
            goal_count=0,
            success=False,
        )
        raise
    log_run(
        latency_ms=(time.perf_counter() - start) * 1000,
        entry_count=len(entries),
        goal_count=len(result.detected_goals),
        success=True,
    )
    return result


@app.post(ANALYZE_PATH, response_model=ProcessedResult)
async def post_analyze(request: Request):
    """Analyze a batch of voice entries. Body: { entries: VoiceEntry[] }."""
    try:
        body = await request.json()
        entries = body.get("entries") if isinstance(body, dict) else None
        if not isinstance(entries, list):
            return JSONResponse(
                status_code=400,
                content={"error": INVALID_ENTRIES_MESSAGE},
            )
        validated = []
        for index, raw in enumerate(entries):
            try:
                validated.append(VoiceEntry.model_validate(raw))
            except ValidationError as e:
                return JSONResponse(
                    status_code=400,
                    content={"error": _validation_message(index, e)},
                )
        return _run_analysis(validated)
    except Exception:
        logging.exception("Error processing entries")
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
