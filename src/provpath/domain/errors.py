"""Unified error taxonomy for path resolution failures."""

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable failure kinds surfaced by the engine"""

    PROVIDER_NOT_FOUND = "provider_not_found"
    PROVIDER_MISMATCH = "provider_mismatch"
    PATH_NOT_FOUND = "path_not_found"
    RESOLUTION_ERROR = "resolution_error"
    INVALID_PATH = "invalid_path"
    # Soft condition: logged, never raised
    REGISTRY_ROOT_MISMATCH = "registry_root_mismatch"


@dataclass(slots=True)
class PathEngineError(Exception):
    """Base class for all hard resolution failures."""

    message: str
    code: str = "path_engine_error"
    target: str | None = None
    recommended_action: str = ""

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ProviderNotFoundError(PathEngineError):
    """Raised when a provider name does not match any registered adapter."""

    code: str = ErrorKind.PROVIDER_NOT_FOUND.value
    recommended_action: str = "Use one of the registered provider names and try again."


@dataclass(slots=True)
class ProviderMismatchError(PathEngineError):
    """Raised when a qualified path names a different provider than requested."""

    code: str = ErrorKind.PROVIDER_MISMATCH.value
    recommended_action: str = "Pass a path belonging to the requested provider, or drop the provider constraint."
    expected: str = ""
    actual: str = ""


@dataclass(slots=True)
class PathNotFoundError(PathEngineError):
    """Raised when an exact lookup yields no items."""

    code: str = ErrorKind.PATH_NOT_FOUND.value
    recommended_action: str = "Check that the path exists, or allow non-existent paths."


@dataclass(slots=True)
class ResolutionError(PathEngineError):
    """Raised when the underlying provider fails while looking up items."""

    code: str = ErrorKind.RESOLUTION_ERROR.value
    recommended_action: str = "Check permissions on the target location and try again."
    cause: BaseException | None = None


@dataclass(slots=True)
class InvalidPathError(PathEngineError):
    """Raised when a provider cannot interpret a native path."""

    code: str = ErrorKind.INVALID_PATH.value
    recommended_action: str = "Supply a path rooted in the provider's namespace."
