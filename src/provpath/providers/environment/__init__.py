"""Environment provider."""

from .provider import EnvironmentProvider

environment_provider = EnvironmentProvider()

__all__ = ["EnvironmentProvider", "environment_provider"]
