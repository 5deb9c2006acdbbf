from __future__ import annotations

from pathlib import Path


class KeeboxError(Exception):
    """Base class for every failure that ends an invocation."""


class UsageError(KeeboxError):
    """Raised when the file path or key name is missing or blank."""


class IoError(KeeboxError):
    """Raised when the keybox file cannot be read or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {str(path)!r}")


class FormatError(KeeboxError):
    """Raised for malformed JSON, non-string values, undecodable input or encoder failures."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
