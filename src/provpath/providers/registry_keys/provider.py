"""Registry provider: registry keys addressed as HKEY_...\\Sub\\Key native paths."""

import re

from provpath.context import ExecutionContext
from provpath.domain.errors import InvalidPathError
from provpath.providers.base.models import ItemKind, ProviderItem
from provpath.providers.base.provider import DEFAULT_NAMESPACE, ProviderAdapter, ProviderInfo
from provpath.providers.base.wildcards import has_wildcard, matches, unescape

from .backends import RegistryBackend, default_backend
from .hives import DEFAULT_HIVE_MAP, RegistryHiveMap

SEPARATOR = "\\"
_DRIVE_RE = re.compile(r"^(?P<drive>[A-Za-z_]+):(?P<rest>.*)$", re.DOTALL)


class RegistryProvider(ProviderAdapter):
    """Provider for registry keys"""

    def __init__(
        self,
        backend: RegistryBackend | None = None,
        hive_map: RegistryHiveMap | None = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.backend = backend if backend is not None else default_backend()
        self.hive_map = hive_map if hive_map is not None else DEFAULT_HIVE_MAP
        self._info = ProviderInfo(
            name="Registry",
            namespace=namespace,
            description="Registry keys of the local machine",
            drives=list(self.hive_map.aliases),
            case_sensitive=False,
        )

    @property
    def info(self) -> ProviderInfo:
        return self._info

    def normalize_path(self, raw: str, context: ExecutionContext) -> str:
        path = raw.replace("/", SEPARATOR)
        drive = _DRIVE_RE.match(path)
        if drive and self.hive_map.canonical_hive(drive.group("drive")):
            hive = self.hive_map.canonical_hive(drive.group("drive"))
            return self._join(hive, _segments(drive.group("rest")), raw)

        segments = _segments(path)
        if not segments:
            raise InvalidPathError(
                message="Cannot resolve an empty registry path",
                recommended_action="Supply a key rooted at a registry hive, e.g. HKLM\\SOFTWARE.",
            )
        hive = self._hive_token(segments[0])
        if hive is not None:
            return self._join(hive, segments[1:], raw)

        location = context.location_for(self._info.name)
        if location is None:
            raise InvalidPathError(
                message=f"Unable to detect target registry hive in string [{raw}]",
                target=raw,
                recommended_action="Supply a key rooted at a registry hive, e.g. HKLM\\SOFTWARE.",
            )
        base = self.normalize_path(location, context.model_copy(update={"provider_locations": {}}))
        base_segments = base.split(SEPARATOR)
        return self._join(base_segments[0], base_segments[1:] + segments, raw)

    def resolve_items(self, native_path: str, *, literal: bool, force: bool) -> list[ProviderItem]:
        # Registry keys carry no hidden attribute; force has nothing to reveal
        del force
        if literal or not has_wildcard(native_path):
            path = native_path if literal else unescape(native_path)
            stored = self.backend.canonical_path(path)
            if stored is None:
                return []
            return [ProviderItem(native_path=stored, kind=ItemKind.CONTAINER)]
        return [
            ProviderItem(native_path=path, kind=ItemKind.CONTAINER)
            for path in self._expand(native_path.split(SEPARATOR))
        ]

    def is_container(self, native_path: str) -> bool:
        return self.backend.key_exists(native_path)

    def item_kind(self, native_path: str) -> ItemKind:
        return ItemKind.CONTAINER

    def parse_leaf(self, native_path: str) -> str:
        return native_path.rsplit(SEPARATOR, 1)[-1]

    def relative_path(self, native_path: str, context: ExecutionContext) -> str:
        location = context.location_for(self._info.name)
        if location is None:
            return native_path
        base = self.normalize_path(location, context.model_copy(update={"provider_locations": {}}))
        if native_path.lower() == base.lower():
            return "."
        prefix = base + SEPARATOR
        if native_path.lower().startswith(prefix.lower()):
            return "." + SEPARATOR + native_path[len(prefix):]
        return native_path

    def _expand(self, segments: list[str]) -> list[str]:
        head = segments[0]
        if has_wildcard(head):
            candidates = [hive for hive in self.hive_map.hives if matches(hive, head)]
        else:
            candidates = [head]
        for segment in segments[1:]:
            found: list[str] = []
            for base in candidates:
                if has_wildcard(segment):
                    found.extend(
                        base + SEPARATOR + name
                        for name in self.backend.subkey_names(base)
                        if matches(name, segment)
                    )
                else:
                    stored = self.backend.canonical_path(base + SEPARATOR + unescape(segment))
                    if stored is not None:
                        found.append(stored)
            candidates = found
            if not candidates:
                break
        return candidates

    def _hive_token(self, token: str) -> str | None:
        hive = self.hive_map.canonical_hive(token)
        if hive is not None:
            return hive
        if has_wildcard(token) and any(matches(name, token) for name in self.hive_map.hives):
            return token
        return None

    @staticmethod
    def _join(hive: str, segments: list[str], raw: str) -> str:
        resolved: list[str] = [hive]
        for segment in segments:
            if segment == ".":
                continue
            if segment == "..":
                if len(resolved) == 1:
                    raise InvalidPathError(
                        message=f"Registry path [{raw}] climbs above its hive",
                        target=raw,
                    )
                resolved.pop()
                continue
            resolved.append(segment)
        return SEPARATOR.join(resolved)


def _segments(path: str) -> list[str]:
    return [segment for segment in path.split(SEPARATOR) if segment]
