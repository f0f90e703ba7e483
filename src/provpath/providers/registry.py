"""
Provider Registry

Central table of available provider adapters, keyed by provider name.
Lookups are case-insensitive; registration order is preserved and decides
which adapter gets first claim on an unqualified path.
"""

import logging

from provpath.domain.errors import ProviderNotFoundError

from .base.provider import ProviderAdapter

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_NAME = "FileSystem"


class ProviderRegistryClass:
    """Registry for managing provider adapters"""

    def __init__(self, default_provider: str = DEFAULT_PROVIDER_NAME):
        self.providers: dict[str, ProviderAdapter] = {}
        self.default_provider = default_provider

    def register(self, provider: ProviderAdapter) -> None:
        """
        Register a provider adapter

        Args:
            provider: Adapter to register

        Raises:
            ValueError: If an adapter with the same name is already registered
        """
        key = provider.name.lower()
        if key in self.providers:
            raise ValueError(f"Provider '{provider.name}' is already registered")

        self.providers[key] = provider
        logger.debug("Registered provider: %s (%s)", provider.name, provider.info.namespace)

    def get(self, name: str) -> ProviderAdapter | None:
        """
        Get a provider by name

        Args:
            name: Provider name, any case (e.g., 'FileSystem', 'registry')

        Returns:
            Provider adapter or None
        """
        return self.providers.get(name.lower())

    def require(self, name: str) -> ProviderAdapter:
        """
        Get a provider by name, failing loudly

        Raises:
            ProviderNotFoundError: If no adapter is registered under that name
        """
        provider = self.get(name)
        if provider is None:
            available = ", ".join(self.get_all_names()) or "none"
            raise ProviderNotFoundError(
                message=f"Provider '{name}' not found. Available providers: {available}",
                target=name,
                recommended_action=f"Use one of the registered providers: {available}.",
            )
        return provider

    def default(self) -> ProviderAdapter:
        """Adapter used for unqualified paths nobody else claims"""
        return self.require(self.default_provider)

    def find_claiming(self, raw: str) -> ProviderAdapter | None:
        """First registered adapter that claims an unqualified raw path"""
        for provider in self.providers.values():
            if provider.claims(raw):
                return provider
        return None

    def get_all(self) -> list[ProviderAdapter]:
        return list(self.providers.values())

    def get_all_names(self) -> list[str]:
        return [provider.name for provider in self.providers.values()]

    def has(self, name: str) -> bool:
        return name.lower() in self.providers

    def clear(self) -> None:
        """Clear all registered providers (useful for testing)"""
        self.providers.clear()

    def unregister(self, name: str) -> None:
        self.providers.pop(name.lower(), None)


def build_registry(*providers: ProviderAdapter, default_provider: str = DEFAULT_PROVIDER_NAME) -> ProviderRegistryClass:
    """Create a standalone registry, e.g. for hosts adding their own adapters"""
    registry = ProviderRegistryClass(default_provider=default_provider)
    for provider in providers:
        registry.register(provider)
    return registry


# Singleton instance
ProviderRegistry = ProviderRegistryClass()
