"""Registry provider, hive tables and storage backends."""

from .backends import MemoryRegistryBackend, RegistryBackend, WinRegBackend, default_backend
from .hives import (
    DEFAULT_HIVE_MAP,
    HIVE_ALIASES,
    PER_USER_HIVE,
    USERS_HIVE,
    RegistryHiveMap,
    ViewSubstitution,
)
from .provider import RegistryProvider

registry_provider = RegistryProvider()

__all__ = [
    "DEFAULT_HIVE_MAP",
    "HIVE_ALIASES",
    "PER_USER_HIVE",
    "USERS_HIVE",
    "MemoryRegistryBackend",
    "RegistryBackend",
    "RegistryHiveMap",
    "RegistryProvider",
    "ViewSubstitution",
    "WinRegBackend",
    "default_backend",
    "registry_provider",
]
