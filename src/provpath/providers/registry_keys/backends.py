"""
Registry storage backends.

The Registry provider never talks to storage directly; it goes through a
RegistryBackend so the resolution layer can run against the live Windows
registry or an in-memory tree.
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .hives import HIVE_ALIASES


class RegistryBackend(ABC):
    """Read-only key lookup over canonical native paths (HKEY_...\\Sub\\Key)"""

    @abstractmethod
    def canonical_path(self, path: str) -> str | None:
        """Stored spelling of an existing key (hive plus subkey names as stored), None if missing"""

    def key_exists(self, path: str) -> bool:
        """Whether the key exists"""
        return self.canonical_path(path) is not None

    @abstractmethod
    def subkey_names(self, path: str) -> list[str]:
        """Names of the key's direct subkeys in storage order, empty if the key is missing

        Raises:
            PermissionError: If the key cannot be opened for enumeration
        """


class _Node:
    __slots__ = ("name", "children", "denied")

    def __init__(self, name: str) -> None:
        self.name = name
        self.children: dict[str, _Node] = {}
        self.denied = False


class MemoryRegistryBackend(RegistryBackend):
    """Case-insensitive in-memory key tree, enumerated in insertion order"""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._roots = {hive: _Node(hive) for hive in HIVE_ALIASES.values()}
        for key in keys:
            self.add_key(key)

    def add_key(self, path: str) -> None:
        """Create a key and any missing parents. Hive aliases are accepted."""
        hive, segments = self._split(path)
        node = self._roots.setdefault(hive, _Node(hive))
        for segment in segments:
            child = node.children.get(segment.lower())
            if child is None:
                child = _Node(segment)
                node.children[segment.lower()] = child
            node = child

    def deny(self, path: str) -> None:
        """Make enumeration of an existing key fail with PermissionError"""
        node = self._find(path)
        if node is None:
            raise KeyError(path)
        node.denied = True

    def canonical_path(self, path: str) -> str | None:
        trail = self._trail(path)
        if trail is None:
            return None
        return "\\".join(node.name for node in trail)

    def subkey_names(self, path: str) -> list[str]:
        node = self._find(path)
        if node is None:
            return []
        if node.denied:
            raise PermissionError(f"Access to registry key '{path}' is denied")
        return [child.name for child in node.children.values()]

    def _find(self, path: str) -> _Node | None:
        trail = self._trail(path)
        return trail[-1] if trail else None

    def _trail(self, path: str) -> list[_Node] | None:
        """Nodes from the hive root down to the key, None if any segment is missing"""
        hive, segments = self._split(path)
        node = self._roots.get(hive)
        if node is None:
            return None
        trail = [node]
        for segment in segments:
            node = node.children.get(segment.lower())
            if node is None:
                return None
            trail.append(node)
        return trail

    @staticmethod
    def _split(path: str) -> tuple[str, list[str]]:
        parts = [part for part in path.replace("/", "\\").split("\\") if part]
        if not parts:
            raise ValueError("Registry path cannot be empty")
        hive = parts[0].rstrip(":").upper()
        return HIVE_ALIASES.get(hive, hive), parts[1:]


class WinRegBackend(RegistryBackend):
    """Live Windows registry through the standard library's winreg module"""

    def __init__(self, access: int = 0) -> None:
        import winreg

        self._winreg = winreg
        # Extra access flags, e.g. winreg.KEY_WOW64_32KEY
        self._access = access

    def key_exists(self, path: str) -> bool:
        try:
            with self._open(path):
                return True
        except FileNotFoundError:
            return False

    def canonical_path(self, path: str) -> str | None:
        hive, _, sub_key = path.partition("\\")
        if not self.key_exists(path):
            return None
        # Subkey names are case-insensitive; walk the parents to recover the stored spelling
        resolved = hive.upper()
        for segment in (part for part in sub_key.split("\\") if part):
            try:
                stored = self.subkey_names(resolved)
            except PermissionError:
                # Parent cannot be enumerated; keep the typed segment
                stored = []
            match = next((name for name in stored if name.lower() == segment.lower()), segment)
            resolved = f"{resolved}\\{match}"
        return resolved

    def subkey_names(self, path: str) -> list[str]:
        try:
            with self._open(path) as key:
                count = self._winreg.QueryInfoKey(key)[0]
                return [self._winreg.EnumKey(key, index) for index in range(count)]
        except FileNotFoundError:
            return []

    def _open(self, path: str):
        hive, _, sub_key = path.partition("\\")
        root = getattr(self._winreg, hive.upper(), None)
        if root is None:
            raise FileNotFoundError(path)
        return self._winreg.OpenKey(root, sub_key, 0, self._winreg.KEY_READ | self._access)


def default_backend() -> RegistryBackend:
    """Live registry on Windows, an empty in-memory tree elsewhere"""
    if sys.platform == "win32":
        return WinRegBackend()
    return MemoryRegistryBackend()
