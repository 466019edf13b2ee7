"""kvstore-lite CLI entry point.

Usage: kvstore-lite [--path FILE] {show,get,put,update,delete,clear} ...

Every command loads the store file into a fresh ConcurrentMap. Mutating
commands then save it back. A missing file reads as an empty store.
"""
from __future__ import annotations

import argparse
import logging
import sys

from kvstore_lite.config import settings
from kvstore_lite.store.concurrent_map import ConcurrentMap
from kvstore_lite.store.errors import KVStoreError, StoreUnavailableError

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kvstore-lite",
        description="Inspect and edit a kvstore-lite store file.",
    )
    parser.add_argument(
        "--path", default=settings.STORE_PATH,
        help=f"Store file (default: {settings.STORE_PATH})",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("show", help="Print every entry.")

    p = subparsers.add_parser("get", help="Print the value stored for KEY.")
    p.add_argument("key")

    p = subparsers.add_parser("put", help="Insert or overwrite KEY.")
    p.add_argument("key")
    p.add_argument("value")

    p = subparsers.add_parser("update", help="Overwrite an existing KEY.")
    p.add_argument("key")
    p.add_argument("value")

    p = subparsers.add_parser("delete", help="Remove KEY and print its old value.")
    p.add_argument("key")

    subparsers.add_parser("clear", help="Remove every entry.")
    return parser


def _open_store(path: str) -> ConcurrentMap[str, object]:
    store: ConcurrentMap[str, object] = ConcurrentMap()
    try:
        store.load(path)
    except StoreUnavailableError as exc:
        if not isinstance(exc.__cause__, FileNotFoundError):
            raise
        log.info("no store at %s, starting empty", path)
    return store


def _run(args: argparse.Namespace) -> None:
    store = _open_store(args.path)

    if args.command == "show":
        store.print()
    elif args.command == "get":
        print(store.get(args.key))
    elif args.command == "put":
        store.put(args.key, args.value)
        store.save(args.path)
    elif args.command == "update":
        store.update(args.key, args.value)
        store.save(args.path)
    elif args.command == "delete":
        print(store.delete(args.key))
        store.save(args.path)
    elif args.command == "clear":
        store.clear()
        store.save(args.path)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    if not isinstance(logging.getLevelName(settings.LOG_LEVEL), int):
        print(f"error: unknown log level {settings.LOG_LEVEL!r}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.LOG_LEVEL)
    try:
        _run(args)
    except KVStoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
