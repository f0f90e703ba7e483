"""One-call entrypoint chaining Resolver, Filter Stage and projection."""

from collections.abc import Iterable

from .filters import filter_items
from .models import PathMode, RawPathSpec
from .options import FilterOptions, ResolveOptions
from .resolver import PathResolver


def resolve_paths(
    paths: Iterable[str],
    *,
    literal: bool = False,
    options: ResolveOptions | None = None,
    filters: FilterOptions | None = None,
    resolver: PathResolver | None = None,
) -> list[str]:
    """
    Resolve raw paths to output strings

    Args:
        paths: Raw path strings
        literal: Treat every path literally (no wildcard expansion)
        options: Resolution options (provider, force, existence, projection)
        filters: Post-resolution filters
        resolver: Resolver to use (default: one over the built-in providers)

    Returns:
        Qualified, native or relative path strings, in resolution order
    """
    resolver = resolver if resolver is not None else PathResolver()
    mode = PathMode.LITERAL if literal else PathMode.PATTERN
    specs = [RawPathSpec(value=path, mode=mode) for path in paths]
    items = resolver.resolve(specs, options)
    return resolver.project(filter_items(items, filters), options)
