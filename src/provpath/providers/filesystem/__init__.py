"""FileSystem provider."""

from .provider import FileSystemProvider

filesystem_provider = FileSystemProvider()

__all__ = ["FileSystemProvider", "filesystem_provider"]
