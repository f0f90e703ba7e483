"""Shared helpers for provpath tests."""

from .fixture_data import REGISTRY_KEYS, TEST_ENVIRON, build_tree

__all__ = ["REGISTRY_KEYS", "TEST_ENVIRON", "build_tree"]
