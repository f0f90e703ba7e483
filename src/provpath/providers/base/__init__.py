"""Base types shared by all provider adapters."""

from .exceptions import ProviderError, ProviderIOError
from .models import ItemKind, ProviderItem
from .provider import DEFAULT_NAMESPACE, ProviderAdapter, ProviderInfo

__all__ = [
    "DEFAULT_NAMESPACE",
    "ItemKind",
    "ProviderAdapter",
    "ProviderError",
    "ProviderIOError",
    "ProviderInfo",
    "ProviderItem",
]
