from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable

from persistence.errors import FormatError
from persistence.keybox_state import KeyboxDoc

logger = logging.getLogger(__name__)

# Emitted for a key that is not in the keybox. Absence is not an error.
PLACEHOLDER_VALUE = "other"

# Unicode White_Space code points; the \x1c-\x1f separators are not trimmed.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class Outcome(enum.Enum):
    READ_ONLY = "read-only"
    DELETE = "delete"
    UPSERT = "upsert"


@dataclass
class TransactionResult:
    keybox: KeyboxDoc
    outcome: Outcome
    emitted: str

    @property
    def mutated(self) -> bool:
        return self.outcome is not Outcome.READ_ONLY


def run_transaction(
    keybox: KeyboxDoc,
    key: str,
    *,
    stdout: BinaryIO,
    stdin_is_tty: bool,
    read_stdin: Callable[[], bytes],
) -> TransactionResult:
    """
    Echo the current value of `key`, then apply whatever was piped in.

    The current value (or PLACEHOLDER_VALUE) is written and flushed to stdout before
    stdin is looked at, so callers always see the pre-transaction value even when a
    later step fails.

      - stdin is a terminal      -> READ_ONLY, keybox untouched
      - zero bytes piped         -> DELETE (no-op if the key is absent)
      - any other bytes piped    -> UPSERT with the UTF-8 text, stripped of WHITESPACE

    Whitespace-only input is an UPSERT of "" since emptiness is tested on the raw bytes.
    """
    current = keybox.get(key)
    emitted = PLACEHOLDER_VALUE if current is None else current
    stdout.write(emitted.encode("utf-8"))
    stdout.flush()

    if stdin_is_tty:
        logger.debug("stdin is a terminal; read-only lookup of %r", key)
        return TransactionResult(keybox=keybox, outcome=Outcome.READ_ONLY, emitted=emitted)

    data = read_stdin()

    if len(data) == 0:
        removed = keybox.remove(key)
        logger.debug("empty input; delete %r (present=%s)", key, removed)
        return TransactionResult(keybox=keybox, outcome=Outcome.DELETE, emitted=emitted)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError("input data is not valid utf-8") from exc

    keybox.put(key, text.strip(WHITESPACE))
    logger.debug("stored %d bytes of input under %r", len(data), key)
    return TransactionResult(keybox=keybox, outcome=Outcome.UPSERT, emitted=emitted)
