"""Domain types and contracts for provpath entrypoints."""

from .errors import (
    ErrorKind,
    InvalidPathError,
    PathEngineError,
    PathNotFoundError,
    ProviderMismatchError,
    ProviderNotFoundError,
    ResolutionError,
)
from .results import CommandResult

__all__ = [
    "CommandResult",
    "ErrorKind",
    "PathEngineError",
    "ProviderNotFoundError",
    "ProviderMismatchError",
    "PathNotFoundError",
    "ResolutionError",
    "InvalidPathError",
]
