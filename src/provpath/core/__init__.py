"""Path resolution engine: qualifier, resolver, filter stage and registry converter."""

from .diagnostics import DiagnosticSink
from .filters import filter_items, project_items
from .models import PathMode, QualifiedPath, RawPathSpec, ResolvedItem
from .options import ErrorPolicy, FilterOptions, PathType, ResolveOptions
from .pipeline import resolve_paths
from .qualifier import PathQualifier
from .registry_paths import RegistryPathConverter, convert_registry_path, rewrite_for_sid
from .resolver import PathResolver

__all__ = [
    "DiagnosticSink",
    "ErrorPolicy",
    "FilterOptions",
    "PathMode",
    "PathQualifier",
    "PathResolver",
    "PathType",
    "QualifiedPath",
    "RawPathSpec",
    "RegistryPathConverter",
    "ResolveOptions",
    "ResolvedItem",
    "convert_registry_path",
    "filter_items",
    "project_items",
    "resolve_paths",
    "rewrite_for_sid",
]
