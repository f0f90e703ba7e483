"""
Registry Path Converter

Converts a registry key in any accepted form (HKLM\\..., HKLM:\\...,
HKEY_LOCAL_MACHINE\\..., Registry::...) to its fully qualified canonical
form, optionally remapped to the 32-bit view and/or to a user's hive under
HKEY_USERS.
"""

import logging

from provpath.domain.errors import ErrorKind, InvalidPathError
from provpath.providers.registry_keys.hives import (
    DEFAULT_HIVE_MAP,
    PER_USER_HIVE,
    USERS_HIVE,
    RegistryHiveMap,
)
from provpath.providers.registry_keys.provider import RegistryProvider

from .diagnostics import DiagnosticSink
from .models import RawPathSpec
from .options import ResolveOptions
from .resolver import PathResolver

REGISTRY_PROVIDER_NAME = "Registry"


class RegistryPathConverter:
    """Registry-only client of PathResolver"""

    def __init__(
        self,
        resolver: PathResolver | None = None,
        hive_map: RegistryHiveMap | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.resolver = resolver if resolver is not None else PathResolver(logger=logger)
        self.hive_map = hive_map if hive_map is not None else self._registry_hive_map()
        self.diagnostics = DiagnosticSink(logger) if logger is not None else self.resolver.diagnostics

    def _registry_hive_map(self) -> RegistryHiveMap:
        """Hive map of the resolver's Registry adapter, or the default one"""
        adapter = self.resolver.registry.get(REGISTRY_PROVIDER_NAME)
        if isinstance(adapter, RegistryProvider):
            return adapter.hive_map
        return DEFAULT_HIVE_MAP

    def convert(self, key: str, use_32bit_view: bool = False, sid: str | None = None) -> str | None:
        """
        Convert a registry key to its qualified canonical form

        Args:
            key: Registry key, hive alias or canonical root, existing or not
            use_32bit_view: Remap to the 32-bit (Wow6432Node) view on 64-bit systems
            sid: Rewrite an HKEY_CURRENT_USER key to HKEY_USERS\\<sid>

        Returns:
            The qualified path, or None when a SID was given but the key is not
            rooted at HKEY_CURRENT_USER (conversion declined, not an empty result)

        Raises:
            InvalidPathError: If the key is not rooted at a registry hive, or sid is blank
            ProviderNotFoundError: If no Registry provider is registered
        """
        if sid is not None and not sid.strip():
            raise InvalidPathError(
                message="SID cannot be empty",
                target=key,
                recommended_action="Pass a security identifier such as S-1-5-21-...",
            )

        items = self.resolver.resolve(
            [RawPathSpec.literal(key)],
            ResolveOptions(provider=REGISTRY_PROVIDER_NAME, include_non_existent=True),
        )
        qualified = items[0].path
        native = qualified.native_path

        if use_32bit_view:
            if self.resolver.context.is_64bit:
                native = self.hive_map.apply_32bit_view(native)
            else:
                self.diagnostics.debug("32-bit view requested on a 32-bit system; [%s] left as is", native)

        if sid is not None:
            rewritten = rewrite_for_sid(native, sid)
            if rewritten is None:
                self.diagnostics.info(
                    "SID parameter specified but the registry hive of the key [%s] is not %s.",
                    native,
                    PER_USER_HIVE,
                    code=ErrorKind.REGISTRY_ROOT_MISMATCH.value,
                )
                return None
            native = rewritten

        result = str(qualified.with_native(native))
        self.diagnostics.debug("Return fully qualified registry key path [%s].", result)
        return result


def rewrite_for_sid(native_path: str, sid: str) -> str | None:
    """Move an HKEY_CURRENT_USER path under HKEY_USERS\\<sid>; None if not per-user rooted"""
    root = PER_USER_HIVE
    upper = native_path.upper()
    if upper != root and not upper.startswith(root + "\\"):
        return None
    return f"{USERS_HIVE}\\{sid}{native_path[len(root):]}"


def convert_registry_path(
    key: str,
    use_32bit_view: bool = False,
    sid: str | None = None,
    *,
    converter: RegistryPathConverter | None = None,
) -> str | None:
    """Module-level shortcut over RegistryPathConverter.convert"""
    converter = converter if converter is not None else RegistryPathConverter()
    return converter.convert(key, use_32bit_view=use_32bit_view, sid=sid)
