"""
provpath

Provider-scoped path resolution: turns literal paths, wildcard patterns and
provider-qualified paths into fully qualified paths, and converts registry
keys to their canonical form.
"""

__version__ = "0.1.0"

from .context import ExecutionContext
from .core import (
    FilterOptions,
    PathQualifier,
    PathResolver,
    PathType,
    QualifiedPath,
    RawPathSpec,
    RegistryPathConverter,
    ResolvedItem,
    ResolveOptions,
    convert_registry_path,
    filter_items,
    resolve_paths,
)
from .domain.errors import (
    InvalidPathError,
    PathEngineError,
    PathNotFoundError,
    ProviderMismatchError,
    ProviderNotFoundError,
    ResolutionError,
)
from .providers import ProviderAdapter, ProviderRegistry, build_registry

__all__ = [
    "__version__",
    "ExecutionContext",
    "FilterOptions",
    "PathQualifier",
    "PathResolver",
    "PathType",
    "QualifiedPath",
    "RawPathSpec",
    "RegistryPathConverter",
    "ResolvedItem",
    "ResolveOptions",
    "convert_registry_path",
    "filter_items",
    "resolve_paths",
    "PathEngineError",
    "ProviderNotFoundError",
    "ProviderMismatchError",
    "PathNotFoundError",
    "ResolutionError",
    "InvalidPathError",
    "ProviderAdapter",
    "ProviderRegistry",
    "build_registry",
]
