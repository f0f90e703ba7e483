"""
Execution Context

Carries the ambient state path resolution depends on: the current location,
per-provider locations and whether the host is a 64-bit system.
"""

import os
import platform

from pydantic import BaseModel, ConfigDict, Field

_64BIT_MACHINES = {"amd64", "x86_64", "arm64", "aarch64", "ia64", "ppc64le", "s390x"}


def detect_64bit() -> bool:
    """Return True when the operating system reports a 64-bit machine type"""
    machine = platform.machine().lower()
    return machine in _64BIT_MACHINES or machine.endswith("64")


class ExecutionContext(BaseModel):
    """Explicit replacement for process-wide location and architecture state"""

    model_config = ConfigDict(frozen=True)

    current_location: str = Field(default_factory=os.getcwd)
    # Keyed by provider name, case-insensitive (e.g. {"Registry": "HKEY_CURRENT_USER\\Software"})
    provider_locations: dict[str, str] = Field(default_factory=dict)
    is_64bit: bool = Field(default_factory=detect_64bit)
    home: str | None = None

    @classmethod
    def detect(cls) -> "ExecutionContext":
        """Build a context from the running process"""
        return cls(current_location=os.getcwd(), is_64bit=detect_64bit())

    def location_for(self, provider_name: str) -> str | None:
        """Current location inside a non-default provider, if one was set"""
        wanted = provider_name.lower()
        for name, location in self.provider_locations.items():
            if name.lower() == wanted:
                return location
        return None
