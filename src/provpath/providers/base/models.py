"""
Base Model Types for Provider Adapters
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ItemKind(StrEnum):
    """Kind of an item inside a provider namespace"""

    CONTAINER = "container"
    LEAF = "leaf"
    UNKNOWN = "unknown"


class ProviderItem(BaseModel):
    """One concrete item reported by a provider adapter"""

    model_config = ConfigDict(frozen=True)

    native_path: str  # Provider-native path (e.g., '/tmp/a.txt', 'HKEY_USERS\\.DEFAULT')
    kind: ItemKind
