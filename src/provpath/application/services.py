"""Application service layer over the resolution engine.

Services translate plain CLI/SDK arguments into engine options, run the
engine, and fold every outcome (including domain errors) into a
CommandResult so callers decide how to present it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from provpath.context import ExecutionContext
from provpath.core.filters import filter_items
from provpath.core.models import PathMode, RawPathSpec
from provpath.core.options import ErrorPolicy, FilterOptions, PathType, ResolveOptions
from provpath.core.registry_paths import REGISTRY_PROVIDER_NAME, RegistryPathConverter
from provpath.core.resolver import PathResolver
from provpath.domain.errors import ErrorKind, PathEngineError
from provpath.domain.results import CommandResult
from provpath.providers.registry import ProviderRegistry, ProviderRegistryClass
from provpath.providers.registry_keys.hives import RegistryHiveMap
from provpath.providers.registry_keys.provider import RegistryProvider


def _default_registry() -> ProviderRegistryClass:
    return ProviderRegistry


@dataclass(slots=True)
class ResolveService:
    """Resolve, filter and project paths."""

    registry: ProviderRegistryClass = field(default_factory=_default_registry)
    context: ExecutionContext | None = None
    logger: logging.Logger | None = None

    def run(
        self,
        *,
        paths: list[str],
        literal: bool = False,
        provider: str | None = None,
        force: bool = False,
        include_non_existent: bool = False,
        as_native_path: bool = False,
        relative: bool = False,
        continue_on_error: bool = False,
        path_type: str = PathType.ANY.value,
        name_filter: str | None = None,
        include: list[str] | None = None,
        exclude: list[str] | None = None,
    ) -> CommandResult:
        try:
            options = ResolveOptions(
                provider=provider,
                force=force,
                include_non_existent=include_non_existent,
                as_native_path=as_native_path,
                relative=relative,
                on_error=ErrorPolicy.CONTINUE if continue_on_error else ErrorPolicy.FAIL_FAST,
            )
            filters = FilterOptions(
                path_type=PathType(path_type),
                filter=name_filter,
                include=include or [],
                exclude=exclude or [],
            )
        except (ValidationError, ValueError) as e:
            return CommandResult(success=False, code="invalid_options", message=str(e))

        resolver = PathResolver(registry=self.registry, context=self.context, logger=self.logger)
        mode = PathMode.LITERAL if literal else PathMode.PATTERN
        try:
            items = resolver.resolve([RawPathSpec(value=path, mode=mode) for path in paths], options)
        except PathEngineError as e:
            return CommandResult.from_error(e)

        kept = filter_items(items, filters)
        return CommandResult(
            success=True,
            code="resolved",
            message=f"Resolved {len(kept)} path(s)",
            data={
                "paths": resolver.project(kept, options),
                "items": [
                    {
                        "path": item.qualified,
                        "provider": item.path.provider,
                        "exists": item.exists,
                        "kind": item.kind.value,
                    }
                    for item in kept
                ],
            },
        )


@dataclass(slots=True)
class RegistryPathService:
    """Convert registry keys to their qualified canonical form."""

    registry: ProviderRegistryClass = field(default_factory=_default_registry)
    context: ExecutionContext | None = None
    logger: logging.Logger | None = None

    def run(
        self,
        *,
        key: str,
        use_32bit_view: bool = False,
        sid: str | None = None,
        hive_map_file: Path | None = None,
    ) -> CommandResult:
        registry = self.registry
        hive_map = None
        if hive_map_file is not None:
            try:
                hive_map = RegistryHiveMap.from_file(hive_map_file)
            except (OSError, ValueError) as e:
                return CommandResult(
                    success=False,
                    code="invalid_hive_map",
                    message=f"Cannot load hive map '{hive_map_file}': {e}",
                    recommended_action="Fix the hive map JSON file or omit --hive-map.",
                )
            registry = _with_hive_map(self.registry, hive_map)

        resolver = PathResolver(registry=registry, context=self.context, logger=self.logger)
        converter = RegistryPathConverter(resolver, hive_map=hive_map, logger=self.logger)
        try:
            converted = converter.convert(key, use_32bit_view=use_32bit_view, sid=sid)
        except PathEngineError as e:
            return CommandResult.from_error(e)

        if converted is None:
            return CommandResult(
                success=True,
                code=ErrorKind.REGISTRY_ROOT_MISMATCH.value,
                message="Conversion declined",
                data={"path": None},
                warnings=[f"SID specified but the registry key [{key}] is not rooted at HKEY_CURRENT_USER"],
            )
        return CommandResult(success=True, code="converted", message=converted, data={"path": converted})


@dataclass(slots=True)
class ProvidersService:
    """Describe the registered provider adapters."""

    registry: ProviderRegistryClass = field(default_factory=_default_registry)

    def run(self) -> CommandResult:
        providers = [
            {
                "name": provider.info.name,
                "namespace": provider.info.namespace,
                "drives": list(provider.info.drives),
                "description": provider.info.description,
                "default": provider.name.lower() == self.registry.default_provider.lower(),
            }
            for provider in self.registry.get_all()
        ]
        return CommandResult(
            success=True,
            code="providers",
            message=f"{len(providers)} provider(s) registered",
            data={"providers": providers},
        )


def _with_hive_map(registry: ProviderRegistryClass, hive_map: RegistryHiveMap) -> ProviderRegistryClass:
    """Copy a registry, swapping its Registry adapter for one using hive_map"""
    copy = ProviderRegistryClass(default_provider=registry.default_provider)
    for provider in registry.get_all():
        if provider.name.lower() == REGISTRY_PROVIDER_NAME.lower() and isinstance(provider, RegistryProvider):
            provider = RegistryProvider(
                backend=provider.backend,
                hive_map=hive_map,
                namespace=provider.info.namespace,
            )
        copy.register(provider)
    return copy
