"""
Base Provider Interface

Defines the contract that all provider adapters must implement.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from provpath.context import ExecutionContext

from .models import ItemKind, ProviderItem

DEFAULT_NAMESPACE = "Microsoft.PowerShell.Core"


class ProviderInfo(BaseModel):
    """Provider metadata"""

    name: str  # Unique provider name (e.g., 'FileSystem', 'Registry')
    namespace: str = DEFAULT_NAMESPACE  # Module namespace prefixed to qualified paths
    description: str = ""
    drives: list[str] = []  # Drive names claimed by this provider (e.g., ['HKLM', 'HKCU'])
    case_sensitive: bool = False  # Whether wildcard matching respects case


class ProviderAdapter(ABC):
    """Resolution-facing view of one hierarchical namespace"""

    @property
    @abstractmethod
    def info(self) -> ProviderInfo:
        """Provider metadata"""

    @abstractmethod
    def normalize_path(self, raw: str, context: ExecutionContext) -> str:
        """Canonicalize a raw native path.

        Must be idempotent: normalizing an already normalized path returns it
        unchanged. Wildcards and escape characters are preserved.

        Raises:
            InvalidPathError: If the provider cannot interpret the path
        """

    @abstractmethod
    def resolve_items(self, native_path: str, *, literal: bool, force: bool) -> list[ProviderItem]:
        """Enumerate items matching a normalized native path

        Args:
            native_path: Output of normalize_path
            literal: Exact lookup, wildcards are ordinary characters
            force: Include hidden/system items during wildcard expansion

        Returns:
            Matching items in the provider's natural order (empty if none)

        Raises:
            OSError, ProviderIOError: If the underlying storage fails
        """

    @abstractmethod
    def is_container(self, native_path: str) -> bool:
        """Whether an existing item can hold child items"""

    @abstractmethod
    def parse_leaf(self, native_path: str) -> str:
        """Return the last path component"""

    @property
    def name(self) -> str:
        return self.info.name

    def claims(self, raw: str) -> bool:
        """Whether an unqualified raw path starts with one of this provider's drives"""
        lowered = raw.lower()
        return any(lowered.startswith(f"{drive.lower()}:") for drive in self.info.drives)

    def item_kind(self, native_path: str) -> ItemKind:
        return ItemKind.CONTAINER if self.is_container(native_path) else ItemKind.LEAF

    def relative_path(self, native_path: str, context: ExecutionContext) -> str:
        """Express a native path relative to the provider's current location"""
        return native_path
