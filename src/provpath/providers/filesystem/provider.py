"""FileSystem provider backed by the host's local filesystem."""

import os
import stat
from pathlib import PurePath

from provpath.context import ExecutionContext
from provpath.domain.errors import InvalidPathError
from provpath.providers.base.models import ItemKind, ProviderItem
from provpath.providers.base.provider import DEFAULT_NAMESPACE, ProviderAdapter, ProviderInfo
from provpath.providers.base.wildcards import has_wildcard, matches, unescape

_HIDDEN_ATTRIBUTES = stat.FILE_ATTRIBUTE_HIDDEN | stat.FILE_ATTRIBUTE_SYSTEM


class FileSystemProvider(ProviderAdapter):
    """Provider for files and directories on the host"""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        self._info = ProviderInfo(
            name="FileSystem",
            namespace=namespace,
            description="Files and directories on local and mounted volumes",
            case_sensitive=os.name != "nt",
        )

    @property
    def info(self) -> ProviderInfo:
        return self._info

    def normalize_path(self, raw: str, context: ExecutionContext) -> str:
        if not raw:
            raise InvalidPathError(
                message="Cannot resolve an empty filesystem path",
                recommended_action="Supply a non-empty path.",
            )
        path = self._expand_home(raw, context)
        if not os.path.isabs(path):
            path = os.path.join(context.current_location, path)
        return os.path.normpath(path)

    def resolve_items(self, native_path: str, *, literal: bool, force: bool) -> list[ProviderItem]:
        if literal:
            return self._exact(native_path)
        if not has_wildcard(native_path):
            return self._exact(unescape(native_path))
        return [
            ProviderItem(native_path=path, kind=self.item_kind(path))
            for path in self._expand(native_path, force)
        ]

    def is_container(self, native_path: str) -> bool:
        return os.path.isdir(native_path)

    def parse_leaf(self, native_path: str) -> str:
        return os.path.basename(native_path.rstrip("\\/")) or native_path

    def relative_path(self, native_path: str, context: ExecutionContext) -> str:
        try:
            relative = os.path.relpath(native_path, context.current_location)
        except ValueError:
            # Different drives on Windows
            return native_path
        if relative == os.curdir or relative.startswith(os.pardir):
            return relative
        return os.curdir + os.sep + relative

    def _exact(self, path: str) -> list[ProviderItem]:
        stored = _stored_spelling(path)
        if stored is None:
            return []
        return [ProviderItem(native_path=stored, kind=self.item_kind(stored))]

    def _expand(self, native_path: str, force: bool) -> list[str]:
        pure = PurePath(native_path)
        components = pure.parts[1:] if pure.anchor else pure.parts
        candidates = [pure.anchor or os.curdir]
        for component in components:
            found: list[str] = []
            for base in candidates:
                if has_wildcard(component):
                    found.extend(self._children_matching(base, component, force))
                else:
                    child = _stored_child(base, unescape(component))
                    if child is not None:
                        found.append(child)
            candidates = found
            if not candidates:
                break
        return candidates

    def _children_matching(self, base: str, pattern: str, force: bool) -> list[str]:
        if not os.path.isdir(base):
            return []
        with os.scandir(base) as entries:
            ordered = sorted(entries, key=lambda entry: (entry.name.lower(), entry.name))
        return [
            os.path.join(base, entry.name)
            for entry in ordered
            if (force or not _is_hidden(entry))
            and matches(entry.name, pattern, self._info.case_sensitive)
        ]

    @staticmethod
    def _expand_home(raw: str, context: ExecutionContext) -> str:
        if not raw.startswith("~"):
            return raw
        if context.home is None:
            return os.path.expanduser(raw)
        if raw == "~" or raw[1] in "\\/":
            return context.home + raw[1:]
        return raw


def _is_hidden(entry: os.DirEntry) -> bool:
    if entry.name.startswith("."):
        return True
    attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    return bool(attributes & _HIDDEN_ATTRIBUTES)


def _stored_spelling(path: str) -> str | None:
    """Existing path rebuilt from the names as stored on disk, None if missing"""
    if not os.path.lexists(path):
        return None
    pure = PurePath(path)
    resolved = pure.anchor
    for component in pure.parts[1:] if pure.anchor else pure.parts:
        child = _stored_child(resolved, component)
        if child is None:
            return None
        resolved = child
    return resolved


def _stored_child(base: str, name: str) -> str | None:
    child = os.path.join(base, name)
    if not os.path.lexists(child):
        return None
    try:
        names = os.listdir(base or os.curdir)
    except OSError:
        # Traversable but not listable: keep the typed spelling
        return child
    if name in names:
        return child
    folded = name.casefold()
    stored = next((entry for entry in names if entry.casefold() == folded), name)
    return os.path.join(base, stored)
