# ABOUTME: Analysis telemetry: one structured JSON log line per processed batch.
# ABOUTME: Emitted by the API layer; the voice_goals engine itself never logs.

import json
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class TelemetryLogEntry:
    """Structured telemetry entry for one batch analysis."""

    timestamp: str
    latency_ms: float
    entry_count: int
    goal_count: int
    success: bool

    def to_json(self) -> str:
        return json.dumps(
            {
                "timestamp": self.timestamp,
                "latency_ms": round(self.latency_ms, 2),
                "entry_count": self.entry_count,
                "goal_count": self.goal_count,
                "success": self.success,
            }
        )


def log_run(
    *,
    latency_ms: float,
    entry_count: int,
    goal_count: int,
    success: bool,
) -> None:
    """Print a structured JSON log line to stdout for one analysis run."""
    entry = TelemetryLogEntry(
        timestamp=datetime.now(tz=timezone.utc).isoformat(),
        latency_ms=latency_ms,
        entry_count=entry_count,
        goal_count=goal_count,
        success=success,
    )
    print(entry.to_json(), flush=True)
