"""
Resolution and filter options.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class PathType(StrEnum):
    """Item kinds accepted by the filter stage"""

    ANY = "any"
    CONTAINER = "container"
    LEAF = "leaf"


class ErrorPolicy(StrEnum):
    """What a batch does when one path fails hard"""

    FAIL_FAST = "fail_fast"
    CONTINUE = "continue"


class ResolveOptions(BaseModel):
    """Options for one resolution call"""

    model_config = ConfigDict(frozen=True)

    provider: str | None = None  # Restrict resolution to this provider name
    force: bool = False  # Include hidden/system items in wildcard expansion
    include_non_existent: bool = False  # Synthesize items for missing exact paths
    as_native_path: bool = False  # Emit provider-native paths instead of qualified ones
    relative: bool = False  # Emit paths relative to the current location
    on_error: ErrorPolicy = ErrorPolicy.FAIL_FAST

    @model_validator(mode="after")
    def _single_projection(self) -> "ResolveOptions":
        if self.as_native_path and self.relative:
            raise ValueError("as_native_path and relative are mutually exclusive")
        return self


class FilterOptions(BaseModel):
    """Post-resolution narrowing, applied in order: path type, filter, exclude, include"""

    model_config = ConfigDict(frozen=True)

    path_type: PathType = PathType.ANY
    filter: str | None = None
    exclude: list[str] = []
    include: list[str] = []
