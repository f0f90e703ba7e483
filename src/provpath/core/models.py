"""
Resolution Model Types

Transient values built and discarded within one resolution call.
"""

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from provpath.providers.base.models import ItemKind

# [Namespace\]Provider::NativePath
_QUALIFIED_RE = re.compile(
    r"^(?:(?P<namespace>[^\\/:]+)\\)?(?P<provider>[A-Za-z][\w.-]*)::(?P<native>.*)$",
    re.DOTALL,
)


class PathMode(StrEnum):
    """How a raw path string is interpreted"""

    LITERAL = "literal"  # Wildcard metacharacters are ordinary characters
    PATTERN = "pattern"  # Wildcards expand against the provider's items


class RawPathSpec(BaseModel):
    """A user-supplied path together with its interpretation mode"""

    model_config = ConfigDict(frozen=True)

    value: str
    mode: PathMode = PathMode.PATTERN

    @classmethod
    def literal(cls, value: str) -> "RawPathSpec":
        return cls(value=value, mode=PathMode.LITERAL)

    @classmethod
    def pattern(cls, value: str) -> "RawPathSpec":
        return cls(value=value, mode=PathMode.PATTERN)

    @property
    def is_literal(self) -> bool:
        return self.mode is PathMode.LITERAL


class QualifiedPath(BaseModel):
    """A native path tagged with its owning provider"""

    model_config = ConfigDict(frozen=True)

    namespace: str
    provider: str
    native_path: str

    def __str__(self) -> str:
        return f"{self.namespace}\\{self.provider}::{self.native_path}"

    def with_native(self, native_path: str) -> "QualifiedPath":
        return self.model_copy(update={"native_path": native_path})

    @staticmethod
    def split(text: str) -> tuple[str | None, str, str] | None:
        """Split '[Namespace\\]Provider::Native' into its parts, or None if unqualified"""
        match = _QUALIFIED_RE.match(text)
        if match is None:
            return None
        return match.group("namespace"), match.group("provider"), match.group("native")


class ResolvedItem(BaseModel):
    """One resolution result"""

    model_config = ConfigDict(frozen=True)

    path: QualifiedPath
    exists: bool = True  # False for synthesized non-existent paths
    kind: ItemKind = ItemKind.UNKNOWN
    leaf: str = ""  # Last path component, used by name filters

    @property
    def qualified(self) -> str:
        return str(self.path)

    @property
    def native_path(self) -> str:
        return self.path.native_path
