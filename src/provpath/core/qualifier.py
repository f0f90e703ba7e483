"""
Path Qualifier

Turns a raw path string into a provider-qualified path
(Namespace\\Provider::NativePath) without touching storage.
"""

from provpath.context import ExecutionContext
from provpath.domain.errors import ProviderMismatchError, ProviderNotFoundError
from provpath.providers.base.provider import ProviderAdapter
from provpath.providers.registry import ProviderRegistry, ProviderRegistryClass

from .models import QualifiedPath


class PathQualifier:
    """Selects the owning provider adapter and canonicalizes the native path"""

    def __init__(
        self,
        registry: ProviderRegistryClass | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        self.registry = registry if registry is not None else ProviderRegistry
        self.context = context if context is not None else ExecutionContext.detect()

    def qualify(self, raw: str, provider: str | None = None) -> QualifiedPath:
        """
        Qualify a raw path

        Args:
            raw: Literal path, wildcard pattern or '[Namespace\\]Provider::Native' string
            provider: Optional provider name the path must belong to

        Returns:
            QualifiedPath; qualifying its string form again returns an equal value

        Raises:
            ProviderNotFoundError: If a provider name (hinted or embedded) is not registered
            ProviderMismatchError: If an embedded provider differs from the hint
            InvalidPathError: If the adapter cannot interpret the native path
        """
        hinted = self.registry.require(provider) if provider is not None else None
        parts = QualifiedPath.split(raw)

        if parts is not None:
            namespace, embedded_name, native = parts
            adapter = self._embedded_adapter(namespace, embedded_name)
            if hinted is not None and hinted is not adapter:
                raise ProviderMismatchError(
                    message=(
                        f"The path [{raw}] belongs to provider '{adapter.name}' "
                        f"but provider '{hinted.name}' was requested"
                    ),
                    target=raw,
                    expected=hinted.name,
                    actual=adapter.name,
                )
        elif hinted is not None:
            adapter, native = hinted, raw
        else:
            adapter = self.registry.find_claiming(raw) or self.registry.default()
            native = raw

        return QualifiedPath(
            namespace=adapter.info.namespace,
            provider=adapter.name,
            native_path=adapter.normalize_path(native, self.context),
        )

    def adapter_for(self, qualified: QualifiedPath) -> ProviderAdapter:
        return self.registry.require(qualified.provider)

    def _embedded_adapter(self, namespace: str | None, name: str) -> ProviderAdapter:
        adapter = self.registry.require(name)
        if namespace is not None and namespace.lower() != adapter.info.namespace.lower():
            raise ProviderNotFoundError(
                message=(
                    f"Provider '{namespace}\\{name}' not found; "
                    f"'{adapter.name}' is registered under '{adapter.info.namespace}'"
                ),
                target=f"{namespace}\\{name}",
            )
        return adapter
