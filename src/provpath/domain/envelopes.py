"""JSON envelopes emitted by the CLI's --json mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .results import CommandResult


@dataclass(slots=True, frozen=True)
class EnvelopeError:
    """Machine-readable error entry for command envelopes."""

    code: str
    message: str
    recommended_action: str = ""
    target: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.recommended_action:
            payload["recommendedAction"] = self.recommended_action
        if self.target is not None:
            payload["target"] = self.target
        return payload


@dataclass(slots=True, frozen=True)
class CommandEnvelope:
    """Standardized envelope structure for one CLI invocation."""

    command: str
    status: str
    data: Any
    warnings: list[str]
    errors: list[EnvelopeError]
    duration_ms: int
    schema_version: str = "1"

    def to_dict(self) -> dict[str, Any]:
        return {
            "schemaVersion": self.schema_version,
            "command": self.command,
            "status": self.status,
            "data": self.data,
            "warnings": self.warnings,
            "errors": [error.to_dict() for error in self.errors],
            "meta": {"durationMs": self.duration_ms},
        }


def build_envelope(*, command: str, result: CommandResult, duration_ms: int) -> dict[str, Any]:
    """Wrap a service result into a JSON-ready envelope."""
    if result.success:
        errors: list[EnvelopeError] = []
        status = "success"
    else:
        errors = [
            EnvelopeError(
                code=result.code,
                message=result.message,
                recommended_action=result.recommended_action,
                target=result.data.get("target"),
            )
        ]
        status = "error"
    envelope = CommandEnvelope(
        command=command,
        status=status,
        data=result.data,
        warnings=list(result.warnings),
        errors=errors,
        duration_ms=duration_ms,
    )
    return envelope.to_dict()
