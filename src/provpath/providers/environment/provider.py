"""Environment provider: a flat namespace of environment variables."""

import os
from collections.abc import Mapping

from provpath.context import ExecutionContext
from provpath.domain.errors import InvalidPathError
from provpath.providers.base.models import ItemKind, ProviderItem
from provpath.providers.base.provider import DEFAULT_NAMESPACE, ProviderAdapter, ProviderInfo
from provpath.providers.base.wildcards import has_wildcard, matches, unescape


class EnvironmentProvider(ProviderAdapter):
    """Provider exposing environment variables as leaf items"""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self._info = ProviderInfo(
            name="Environment",
            namespace=namespace,
            description="Process environment variables",
            drives=["Env"],
            case_sensitive=False,
        )

    @property
    def info(self) -> ProviderInfo:
        return self._info

    def normalize_path(self, raw: str, context: ExecutionContext) -> str:
        name = raw
        if self.claims(name):
            name = name.split(":", 1)[1]
        name = name.strip("\\/")
        if not name or "\\" in name or "/" in name:
            raise InvalidPathError(
                message=f"Environment variable path [{raw}] must name a single variable",
                target=raw,
                recommended_action="Use Env:NAME or a bare variable name.",
            )
        return name

    def resolve_items(self, native_path: str, *, literal: bool, force: bool) -> list[ProviderItem]:
        del force
        if literal or not has_wildcard(native_path):
            wanted = (native_path if literal else unescape(native_path)).lower()
            # Variable names are case-insensitive; report the stored spelling once
            names = [name for name in self._environ if name.lower() == wanted][:1]
        else:
            names = [name for name in self._environ if matches(name, native_path)]
        return [ProviderItem(native_path=name, kind=ItemKind.LEAF) for name in names]

    def is_container(self, native_path: str) -> bool:
        return False

    def parse_leaf(self, native_path: str) -> str:
        return native_path
