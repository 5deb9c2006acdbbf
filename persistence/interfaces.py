from __future__ import annotations

from typing import Protocol

from .keybox_state import KeyboxDoc


class KeyboxStore(Protocol):
    """
    Minimal interface: one keybox document loaded and saved as a whole.
    """

    def load(self) -> KeyboxDoc:
        """Load and validate the full keybox; never returns defaults for a missing file."""
        ...

    def save(self, doc: KeyboxDoc) -> None:
        """Persist the full keybox, replacing what was there."""
        ...
