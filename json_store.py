from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_text(path: Path) -> str:
    """
    Read the whole file as UTF-8 text.

    Raises OSError for unreadable files and UnicodeDecodeError for bytes that are not UTF-8.
    """
    return path.read_text(encoding="utf-8")


def dump_json_bytes(payload: Any, *, indent: int = 2, sort_keys: bool = True) -> bytes:
    text = json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    return (text + "\n").encode("utf-8")


def overwrite_bytes(path: Path, data: bytes) -> None:
    """
    Truncate the file and write `data` in place.

    Symlinks are followed and the file keeps its inode and permission bits.
    """
    with path.open("wb") as f:
        f.write(data)
        f.flush()
