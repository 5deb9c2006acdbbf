from __future__ import annotations

from .disk_store import DiskKeyboxStore
from .errors import FormatError, IoError, KeeboxError, UsageError
from .interfaces import KeyboxStore
from .keybox_state import KeyboxDoc

__all__ = [
    "DiskKeyboxStore",
    "KeyboxStore",
    "KeyboxDoc",
    "KeeboxError",
    "UsageError",
    "IoError",
    "FormatError",
]
