"""
Filter Stage

Narrows resolved items by kind and by glob matches on their leaf names,
then projects the survivors to output strings.
Each filter kind narrows independently (AND); globs within exclude/include
are alternatives (OR).
"""

from collections.abc import Iterable

from provpath.context import ExecutionContext
from provpath.providers.base.wildcards import matches, matches_any
from provpath.providers.registry import ProviderRegistryClass

from .models import ResolvedItem
from .options import FilterOptions, PathType, ResolveOptions


def filter_items(items: Iterable[ResolvedItem], options: FilterOptions | None = None) -> list[ResolvedItem]:
    """
    Apply path type, filter, exclude and include, in that order

    Args:
        items: Resolved items in resolver order
        options: Filters to apply (None keeps everything)

    Returns:
        Surviving items, order preserved. May be empty, including for
        literal paths that were filtered away.
    """
    kept = list(items)
    if options is None:
        return kept

    if options.path_type is not PathType.ANY:
        kept = [item for item in kept if item.kind.value == options.path_type.value]
    if options.filter:
        kept = [item for item in kept if matches(item.leaf, options.filter)]
    if options.exclude:
        kept = [item for item in kept if not matches_any(item.leaf, options.exclude)]
    if options.include:
        kept = [item for item in kept if matches_any(item.leaf, options.include)]
    return kept


def project_items(
    items: Iterable[ResolvedItem],
    options: ResolveOptions | None = None,
    *,
    registry: ProviderRegistryClass,
    context: ExecutionContext,
) -> list[str]:
    """
    Render items as output strings

    Args:
        items: Items to render, usually the output of filter_items
        options: as_native_path emits native paths, relative emits paths
            relative to each provider's current location; default is the
            qualified form
        registry: Provider table used to look up relative_path
        context: Supplies the current locations for relative output

    Returns:
        One string per item, order preserved
    """
    options = options if options is not None else ResolveOptions()
    if options.as_native_path:
        return [item.native_path for item in items]
    if options.relative:
        return [
            registry.require(item.path.provider).relative_path(item.native_path, context)
            for item in items
        ]
    return [item.qualified for item in items]
