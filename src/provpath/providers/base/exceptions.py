"""
Provider-level exceptions for storage access
"""


class ProviderError(Exception):
    """Base exception for provider-level errors"""


class ProviderIOError(ProviderError):
    """Raised when the storage behind a provider cannot be read"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")
