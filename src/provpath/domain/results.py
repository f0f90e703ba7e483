"""Typed result envelopes used by CLI and SDK entrypoints."""

from dataclasses import dataclass, field
from typing import Any

from .errors import PathEngineError


@dataclass(slots=True)
class CommandResult:
    """Common command/service response payload."""

    success: bool
    code: str = "ok"
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    recommended_action: str = ""
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_error(cls, error: PathEngineError) -> "CommandResult":
        """Build a failed result from a domain error."""
        data: dict[str, Any] = {}
        if error.target is not None:
            data["target"] = error.target
        return cls(
            success=False,
            code=error.code,
            message=error.message,
            data=data,
            recommended_action=error.recommended_action,
        )
