"""
Unit tests for the Environment provider.
"""

import pytest

from provpath.domain.errors import InvalidPathError
from provpath.providers.base.models import ItemKind
from provpath.providers.environment import EnvironmentProvider
from tests.utils import TEST_ENVIRON


@pytest.fixture
def provider():
    return EnvironmentProvider(environ=dict(TEST_ENVIRON))


def test_normalize_strips_drive(provider, context):
    assert provider.normalize_path("Env:PATH", context) == "PATH"
    assert provider.normalize_path("env:\\PATH", context) == "PATH"
    assert provider.normalize_path("PATH", context) == "PATH"


def test_nested_names_are_invalid(provider, context):
    with pytest.raises(InvalidPathError):
        provider.normalize_path("Env:A\\B", context)
    with pytest.raises(InvalidPathError):
        provider.normalize_path("Env:", context)


def test_lookup_is_case_insensitive(provider):
    items = provider.resolve_items("path", literal=True, force=False)
    assert [item.native_path for item in items] == ["PATH"]
    assert items[0].kind is ItemKind.LEAF


def test_wildcard_returns_every_match(provider):
    items = provider.resolve_items("PROVPATH_*", literal=False, force=False)
    assert [item.native_path for item in items] == ["PROVPATH_HOME", "PROVPATH_CACHE"]


def test_missing_variable(provider):
    assert provider.resolve_items("NOPE", literal=True, force=False) == []


def test_resolves_through_engine(resolver):
    items = resolver.resolve(["Env:PROVPATH_*"])
    assert [item.qualified for item in items] == [
        "Microsoft.PowerShell.Core\\Environment::PROVPATH_HOME",
        "Microsoft.PowerShell.Core\\Environment::PROVPATH_CACHE",
    ]
    assert all(item.path.provider == "Environment" for item in items)
