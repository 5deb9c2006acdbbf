from __future__ import annotations

import logging
from pathlib import Path

from json_store import dump_json_bytes, overwrite_bytes, read_text

from .errors import FormatError, IoError
from .interfaces import KeyboxStore
from .keybox_state import KeyboxDoc

logger = logging.getLogger(__name__)


class DiskKeyboxStore(KeyboxStore):
    """
    Stores a keybox as a single JSON object on disk at a fixed path.

    - Missing, unreadable or non-UTF-8 files raise IoError.
    - Malformed JSON or non-string values raise FormatError.
    - Saves truncate and rewrite the file in place, keeping its mode and symlinks.
    """

    def __init__(self, path: Path, *, indent: int = 2, sort_keys: bool = True):
        self._path = path
        self._indent = indent
        self._sort_keys = sort_keys

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> KeyboxDoc:
        try:
            raw = read_text(self._path)
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError(self._path, "could not open file") from exc
        doc = KeyboxDoc.from_disk_text(raw)
        logger.debug("loaded %d keys from %s", len(doc), self._path)
        return doc

    def save(self, doc: KeyboxDoc) -> None:
        try:
            data = dump_json_bytes(doc.to_disk_doc(), indent=self._indent, sort_keys=self._sort_keys)
        except (TypeError, ValueError) as exc:
            raise FormatError("failed to serialize new json value") from exc
        try:
            overwrite_bytes(self._path, data)
        except OSError as exc:
            raise IoError(self._path, "failed to write to file") from exc
        logger.debug("wrote %d keys to %s", len(doc), self._path)
