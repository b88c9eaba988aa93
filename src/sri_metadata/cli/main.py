"""
Command-line entry point.

Subcommands:
- ``generate``: digest files and print their integrity metadata
- ``strongest``: print the strongest entries of existing metadata
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Sequence

from ..core.digest import create_integrity_metadata_set
from ..core.errors import SriMetadataError
from ..core.metadata_set import IntegrityMetadataSet
from ..core.settings import Settings


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


async def _generate(
    paths: Sequence[str], algorithms: Sequence[str], options: Sequence[str]
) -> list[tuple[str, IntegrityMetadataSet]]:
    results: list[tuple[str, IntegrityMetadataSet]] = []
    for path in paths:
        data = await asyncio.to_thread(_read_input, path)
        results.append(
            (path, await create_integrity_metadata_set(algorithms, data, options))
        )
    return results


def _print_set(
    label: str, metadata: IntegrityMetadataSet, *, output_format: str
) -> None:
    if output_format == "json":
        print(
            json.dumps(
                {
                    "source": label,
                    "integrity": metadata.to_json(),
                    "entries": [m.to_dict() for m in metadata],
                    "strongest": [str(m) for m in metadata.strongest],
                }
            )
        )
        return
    print(str(metadata))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sri-metadata")
    sub = parser.add_subparsers(dest="command")

    g = sub.add_parser("generate", help="Print integrity metadata for files")
    g.add_argument("paths", nargs="+", help="Files to digest ('-' for stdin)")
    g.add_argument(
        "-a",
        "--algorithm",
        dest="algorithms",
        action="append",
        help="Hash algorithm (repeatable); defaults to core.default_algorithms",
    )
    g.add_argument(
        "--option",
        dest="options",
        action="append",
        default=[],
        help="Option appended to each entry (repeatable)",
    )
    g.add_argument(
        "--format", dest="output_format", choices=["text", "json"], default="text"
    )

    s = sub.add_parser("strongest", help="Print the strongest metadata")
    s.add_argument("metadata", nargs="+")
    s.add_argument(
        "--format", dest="output_format", choices=["text", "json"], default="text"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "generate":
        algorithms = args.algorithms or Settings().core.default_algorithms
        try:
            results = asyncio.run(_generate(args.paths, algorithms, args.options))
        except (OSError, SriMetadataError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        for path, metadata in results:
            _print_set(path, metadata, output_format=args.output_format)
        return 0

    if args.command == "strongest":
        metadata = IntegrityMetadataSet(args.metadata)
        strongest = IntegrityMetadataSet(list(metadata.strongest))
        _print_set("argv", strongest, output_format=args.output_format)
        return 0 if strongest.size else 1

    parser.print_help()
    return 2


def cli_main() -> int:
    return main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
