from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Sequence

from dotenv import load_dotenv

from persistence import DiskKeyboxStore, FormatError, IoError, UsageError
from settings import Settings, get_settings
from transaction import run_transaction

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    path: Path
    key: str


def create_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="keebox",
        description="A minimal CLI utility to manage a multi-tenant keybox.",
        epilog=(
            "Prints the current value of KEY (or 'other' if unset). "
            "Pipe a value on stdin to replace it, or pipe nothing to delete it."
        ),
    )
    p.add_argument("file", help="the keebox file")
    p.add_argument("key", help="the name of the key to get")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def resolve_query(parser: argparse.ArgumentParser, argv: Sequence[str] | None = None) -> Query:
    args = parser.parse_args(argv)
    if not args.file:
        raise UsageError("the keebox file must not be empty")
    if not args.key:
        raise UsageError("the key name must not be empty")
    return Query(path=Path(args.file), key=args.key)


def _configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="keebox: %(levelname)s: %(name)s: %(message)s",
    )


def run(query: Query, settings: Settings, *, stdin: BinaryIO, stdout: BinaryIO) -> None:
    store = DiskKeyboxStore(query.path, indent=settings.json_indent, sort_keys=settings.sort_keys)
    keybox = store.load()

    result = run_transaction(
        keybox,
        query.key,
        stdout=stdout,
        stdin_is_tty=stdin.isatty(),
        read_stdin=stdin.read,
    )
    logger.info("%s %r in %s", result.outcome.value, query.key, query.path)

    if result.mutated:
        store.save(result.keybox)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    load_dotenv("local.env")
    settings = get_settings()
    _configure_logging(settings)

    parser = create_parser()
    try:
        query = resolve_query(parser, argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    try:
        run(
            query,
            settings,
            stdin=stdin if stdin is not None else sys.stdin.buffer,
            stdout=stdout if stdout is not None else sys.stdout.buffer,
        )
    except (IoError, FormatError) as exc:
        logger.debug("aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
