"""JSON output for `--json` commands."""

import time
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigError


@dataclass(slots=True, frozen=True)
class CommandEnvelope:
    """One command's outcome: the payload on success, the resolution error otherwise"""

    command: str
    data: Any = None
    error: ConfigError | None = None
    duration_ms: int = field(default=0, compare=False)

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else 1

    def to_dict(self) -> dict[str, Any]:
        errors = []
        if self.error is not None:
            entry: dict[str, Any] = {"code": self.error.code, "message": self.error.message}
            details = self.error.to_details()
            if details:
                entry["details"] = details
            errors.append(entry)

        return {
            "schemaVersion": "1",
            "command": self.command,
            "status": "success" if self.error is None else "error",
            "data": self.data,
            "errors": errors,
            "meta": {"durationMs": self.duration_ms, "exitCode": self.exit_code},
        }


def build_envelope(
    command: str,
    started: float,
    *,
    data: Any = None,
    error: ConfigError | None = None,
) -> dict[str, Any]:
    """Build the JSON-ready envelope for a command started at `started` (perf_counter)"""
    envelope = CommandEnvelope(
        command=command,
        data=data,
        error=error,
        duration_ms=int((time.perf_counter() - started) * 1000),
    )
    return envelope.to_dict()
