"""Application services used by the CLI and by SDK callers."""

from .services import ProvidersService, RegistryPathService, ResolveService

__all__ = ["ProvidersService", "RegistryPathService", "ResolveService"]
