import os
from pathlib import Path

import pytest

from provpath.context import ExecutionContext
from provpath.core.registry_paths import RegistryPathConverter
from provpath.core.resolver import PathResolver
from provpath.providers.environment import EnvironmentProvider
from provpath.providers.filesystem import FileSystemProvider
from provpath.providers.registry import ProviderRegistryClass, build_registry
from provpath.providers.registry_keys import MemoryRegistryBackend, RegistryProvider
from tests.utils import REGISTRY_KEYS, TEST_ENVIRON, build_tree


@pytest.fixture
def tree(tmp_path) -> Path:
    """Sample directory tree, see tests.utils.fixture_data.build_tree"""
    return build_tree(Path(os.path.realpath(tmp_path)) / "root")


@pytest.fixture
def context(tree: Path) -> ExecutionContext:
    """Execution context rooted at the sample tree on a 64-bit host"""
    return ExecutionContext(current_location=str(tree), is_64bit=True)


@pytest.fixture
def memory_backend() -> MemoryRegistryBackend:
    return MemoryRegistryBackend(REGISTRY_KEYS)


@pytest.fixture
def registry(memory_backend: MemoryRegistryBackend) -> ProviderRegistryClass:
    """Standalone provider table over the in-memory registry and a fake environment"""
    return build_registry(
        FileSystemProvider(),
        RegistryProvider(backend=memory_backend),
        EnvironmentProvider(environ=dict(TEST_ENVIRON)),
    )


@pytest.fixture
def resolver(registry: ProviderRegistryClass, context: ExecutionContext) -> PathResolver:
    return PathResolver(registry=registry, context=context)


@pytest.fixture
def converter(resolver: PathResolver) -> RegistryPathConverter:
    return RegistryPathConverter(resolver)
