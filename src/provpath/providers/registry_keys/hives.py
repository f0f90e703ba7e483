"""
Registry hive names and 32-bit view substitutions.

The default tables are module-level constants built once at import time;
RegistryHiveMap instances are frozen.
"""

import json
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

HIVE_ALIASES: dict[str, str] = {
    "HKLM": "HKEY_LOCAL_MACHINE",
    "HKCU": "HKEY_CURRENT_USER",
    "HKCR": "HKEY_CLASSES_ROOT",
    "HKU": "HKEY_USERS",
    "HKCC": "HKEY_CURRENT_CONFIG",
    "HKPD": "HKEY_PERFORMANCE_DATA",
}

PER_USER_HIVE = "HKEY_CURRENT_USER"
USERS_HIVE = "HKEY_USERS"

_COM_CLASS_ROOTS = "AppID|CLSID|DirectShow|Interface|Media Type|MediaFoundation|PROTOCOLS|TypeLib"


class ViewSubstitution(BaseModel):
    """One ordered rewrite rule: regex pattern over a native registry path"""

    model_config = ConfigDict(frozen=True)

    pattern: str
    replacement: str  # re.sub replacement syntax (\g<1>, ...)

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid substitution pattern '{value}': {e}") from e
        return value

    def matches(self, native_path: str) -> bool:
        return re.search(self.pattern, native_path, flags=re.IGNORECASE) is not None

    def apply(self, native_path: str) -> str:
        return re.sub(self.pattern, self.replacement, native_path, flags=re.IGNORECASE)


def default_view_substitutions() -> list[ViewSubstitution]:
    return [
        # COM registration roots live under Classes\Wow6432Node
        ViewSubstitution(
            pattern=(
                r"^(HKEY_LOCAL_MACHINE\\SOFTWARE\\Classes|HKEY_CURRENT_USER\\SOFTWARE\\Classes"
                rf"|HKEY_CLASSES_ROOT)\\({_COM_CLASS_ROOTS})(?=\\|$)"
            ),
            replacement=r"\g<1>\\Wow6432Node\\\g<2>",
        ),
        ViewSubstitution(
            pattern=r"^(HKEY_LOCAL_MACHINE\\SOFTWARE)(?=\\|$)(?!\\(?:Classes|Wow6432Node)(?:\\|$))",
            replacement=r"\g<1>\\Wow6432Node",
        ),
        ViewSubstitution(
            pattern=r"^(HKEY_CURRENT_USER\\SOFTWARE)(\\Microsoft\\Active Setup\\Installed Components)(?=\\|$)",
            replacement=r"\g<1>\\Wow6432Node\g<2>",
        ),
    ]


class RegistryHiveMap(BaseModel):
    """Hive alias table plus the ordered 32-bit view substitution table"""

    model_config = ConfigDict(frozen=True)

    aliases: dict[str, str] = Field(default_factory=lambda: dict(HIVE_ALIASES))
    view_substitutions: list[ViewSubstitution] = Field(default_factory=default_view_substitutions)

    @field_validator("aliases")
    @classmethod
    def _upper_case(cls, value: dict[str, str]) -> dict[str, str]:
        return {alias.upper(): hive.upper() for alias, hive in value.items()}

    @property
    def hives(self) -> list[str]:
        """Canonical hive roots, deduplicated in table order"""
        return list(dict.fromkeys(self.aliases.values()))

    def canonical_hive(self, token: str) -> str | None:
        """Map an alias or canonical hive name (any case) to its canonical root"""
        upper = token.upper()
        if upper in self.aliases:
            return self.aliases[upper]
        if upper in self.aliases.values():
            return upper
        return None

    def apply_32bit_view(self, native_path: str) -> str:
        """Apply every matching substitution, in table order"""
        for substitution in self.view_substitutions:
            if substitution.matches(native_path):
                native_path = substitution.apply(native_path)
        return native_path

    @classmethod
    def from_file(cls, path: Path) -> "RegistryHiveMap":
        """Load a hive map from JSON.

        Expected shape::

            {
              "aliases": {"HKLM": "HKEY_LOCAL_MACHINE"},
              "viewSubstitutions": [{"pattern": "...", "replacement": "..."}]
            }

        Missing keys fall back to the defaults.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the content is not valid JSON, not an object, or fails validation
        """
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Hive map must be a JSON object, got {type(payload).__name__}")
        data: dict = {}
        if "aliases" in payload:
            data["aliases"] = payload["aliases"]
        if "viewSubstitutions" in payload:
            data["view_substitutions"] = payload["viewSubstitutions"]
        return cls.model_validate(data)


DEFAULT_HIVE_MAP = RegistryHiveMap()
