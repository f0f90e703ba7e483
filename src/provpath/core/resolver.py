"""
Resolver

Qualifies raw paths, asks the owning provider for matching items and applies
the existence policy:

- a literal (or metacharacter-free) path with no match raises PathNotFoundError,
  unless non-existent paths were requested, in which case one synthesized item
  is returned;
- a wildcard pattern with no match is an empty result, never an error.
"""

import logging
from collections.abc import Iterable

from provpath.context import ExecutionContext
from provpath.domain.errors import PathEngineError, PathNotFoundError, ResolutionError
from provpath.providers.base.exceptions import ProviderIOError
from provpath.providers.base.models import ItemKind
from provpath.providers.base.wildcards import has_wildcard
from provpath.providers.registry import ProviderRegistry, ProviderRegistryClass

from .diagnostics import DiagnosticSink
from .filters import project_items
from .models import RawPathSpec, ResolvedItem
from .options import ErrorPolicy, ResolveOptions
from .qualifier import PathQualifier


class PathResolver:
    """Resolves raw path specs to provider-qualified items"""

    def __init__(
        self,
        registry: ProviderRegistryClass | None = None,
        context: ExecutionContext | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.registry = registry if registry is not None else ProviderRegistry
        self.context = context if context is not None else ExecutionContext.detect()
        self.qualifier = PathQualifier(self.registry, self.context)
        self.diagnostics = DiagnosticSink(logger)

    def resolve(
        self,
        specs: Iterable[RawPathSpec | str] | RawPathSpec | str,
        options: ResolveOptions | None = None,
    ) -> list[ResolvedItem]:
        """
        Resolve every spec, in input order

        Plain strings are treated as wildcard-capable patterns. A single spec
        or string is accepted in place of a list.

        Raises:
            PathEngineError: First hard failure, unless options.on_error is CONTINUE
        """
        options = options if options is not None else ResolveOptions()
        if isinstance(specs, (str, RawPathSpec)):
            specs = [specs]
        results: list[ResolvedItem] = []
        for spec in specs:
            if isinstance(spec, str):
                spec = RawPathSpec.pattern(spec)
            try:
                results.extend(self.resolve_one(spec, options))
            except PathEngineError as e:
                if options.on_error is ErrorPolicy.FAIL_FAST:
                    raise
                self.diagnostics.warning("Skipping path [%s]: %s", spec.value, e, code=e.code)
        return results

    def resolve_one(self, spec: RawPathSpec, options: ResolveOptions) -> list[ResolvedItem]:
        qualified = self.qualifier.qualify(spec.value, options.provider)
        adapter = self.qualifier.adapter_for(qualified)

        try:
            found = adapter.resolve_items(
                qualified.native_path, literal=spec.is_literal, force=options.force
            )
        except (OSError, ProviderIOError) as e:
            raise ResolutionError(
                message=f"Failed to resolve path [{qualified}]: {e}",
                target=str(qualified),
                cause=e,
            ) from e

        if found:
            self.diagnostics.debug("Resolved [%s] to %d item(s)", qualified, len(found))
            return [
                ResolvedItem(
                    path=qualified.with_native(item.native_path),
                    exists=True,
                    kind=item.kind,
                    leaf=adapter.parse_leaf(item.native_path),
                )
                for item in found
            ]

        if not spec.is_literal and has_wildcard(qualified.native_path):
            self.diagnostics.info("No items matched wildcard path [%s]", qualified)
            return []

        if options.include_non_existent:
            self.diagnostics.debug("Path [%s] does not exist; returning it unresolved", qualified)
            return [
                ResolvedItem(
                    path=qualified,
                    exists=False,
                    kind=ItemKind.UNKNOWN,
                    leaf=adapter.parse_leaf(qualified.native_path),
                )
            ]

        raise PathNotFoundError(
            message=f"Cannot find path [{qualified}] because it does not exist.",
            target=str(qualified),
        )

    def project(self, items: Iterable[ResolvedItem], options: ResolveOptions | None = None) -> list[str]:
        """Render items as qualified, native or relative path strings"""
        return project_items(items, options, registry=self.registry, context=self.context)
