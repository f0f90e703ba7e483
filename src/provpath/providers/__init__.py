"""
Provider System for provpath

Each provider adapter wraps one hierarchical namespace (filesystem, registry,
environment, ...) behind the uniform ProviderAdapter contract.
"""

from .base.models import ItemKind, ProviderItem
from .base.provider import DEFAULT_NAMESPACE, ProviderAdapter, ProviderInfo
from .environment import environment_provider
from .filesystem import filesystem_provider
from .registry import ProviderRegistry, ProviderRegistryClass, build_registry
from .registry_keys import registry_provider

__all__ = [
    "DEFAULT_NAMESPACE",
    "ItemKind",
    "ProviderAdapter",
    "ProviderInfo",
    "ProviderItem",
    "ProviderRegistry",
    "ProviderRegistryClass",
    "build_registry",
]


def initialize_providers():
    """Register the built-in providers"""
    ProviderRegistry.register(filesystem_provider)
    ProviderRegistry.register(registry_provider)
    ProviderRegistry.register(environment_provider)


# Auto-initialize on import
initialize_providers()
