#!/usr/bin/env python3
"""Command line interface for layerenv.

Merges env files the same way EnvStore.load does and prints or checks
the result.

USAGE:
    layerenv show [PRIMARY] [-o OVERRIDE]... [-s KEY=VALUE]... [--optional] [--format env|json]
    layerenv check [PRIMARY] [-o OVERRIDE]... [-s KEY=VALUE]... --require NAME [NAME ...]

EXAMPLES:
    # Show .env merged with a local override
    layerenv show .env -o .env.local

    # Pin a value on the command line (highest precedence)
    layerenv show -s STAGE=ci --format json

    # Fail a deploy step when required keys are missing or empty
    layerenv check .env --require DATABASE_URL SECRET_KEY

EXIT CODES:
    0  success (check: every required name is defined)
    1  check: at least one required name is missing or empty
    2  load error (missing or empty source)

ENVIRONMENT:
    LAYERENV_FILE, LAYERENV_DIR, LAYERENV_ENCODING, LAYERENV_OPTIONAL
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from layerenv.config import LoadSettings
from layerenv.exceptions import LayerEnvError
from layerenv.logger import StreamLogger
from layerenv.sources import FileSourceReader
from layerenv.store import EnvStore

_PLAIN_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-.,:/@+%"
)


def format_env_line(key: str, value: str) -> str:
    """Render a pair as an env line that parses back to the same value.

    Plain values are printed bare. Values with backslashes are single-quoted
    so they stay literal. Other values are double-quoted with quotes,
    newlines and ``$`` escaped. A value holding a backslash together with
    a single quote or a newline, or ending in a backslash, cannot be
    written losslessly; it is double-quoted and may not round-trip.
    """
    if value and all(char in _PLAIN_CHARS for char in value):
        return f"{key}={value}"
    if "\\" in value and not any(char in value for char in "'\n") and not value.endswith("\\"):
        return f"{key}='{value}'"
    escaped = value.replace('"', '\\"').replace("\n", "\\n").replace("$", "\\$")
    return f'{key}="{escaped}"'


def _parse_pairs(pairs: List[str], parser: argparse.ArgumentParser) -> Dict[str, str]:
    supplied: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            parser.error(f"--set expects KEY=VALUE, got {pair!r}")
        supplied[key.strip()] = value
    return supplied


def _from_cwd(name: str) -> str:
    return str(Path(name).resolve())


def _build_store(args: argparse.Namespace, settings: LoadSettings) -> EnvStore:
    logger = StreamLogger(name="layerenv-cli", level="DEBUG" if args.verbose else "WARNING")
    base_dir = args.dir or settings.base_dir
    if base_dir:
        reader = FileSourceReader(base_dir, encoding=settings.encoding)
    else:
        reader = FileSourceReader.discover(settings.file_name, encoding=settings.encoding)
    return EnvStore(reader=reader, logger=logger, settings=settings)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "primary",
        nargs="?",
        default=None,
        help="Primary env file (default: LAYERENV_FILE or .env)",
    )
    parser.add_argument(
        "-o", "--override",
        action="append",
        default=[],
        metavar="FILE",
        help="Env file overriding the primary; repeat for more, earlier ones win",
    )
    parser.add_argument(
        "-s", "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Value overriding every file",
    )
    parser.add_argument(
        "--optional",
        action="store_true",
        default=None,
        help="Treat missing or empty files as empty instead of failing",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layerenv",
        description="Merge layered .env files and inspect the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  %(prog)s show .env -o .env.local
  %(prog)s show -s STAGE=ci --format json
  %(prog)s check .env --require DATABASE_URL SECRET_KEY
        """,
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="Directory that file names resolve against (default: the cwd; without PRIMARY the default file is searched upward)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log load details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the merged variables")
    _add_source_arguments(show)
    show.add_argument(
        "--format",
        choices=["env", "json"],
        default="env",
        help="Output format (default: %(default)s)",
    )

    check = subparsers.add_parser("check", help="Verify that variables are defined")
    _add_source_arguments(check)
    check.add_argument(
        "--require",
        nargs="+",
        required=True,
        metavar="NAME",
        help="Names that must be present with a non-empty value",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = LoadSettings.from_env()
    store = _build_store(args, settings)
    supplied = _parse_pairs(args.set, parser)

    primary = args.primary
    overrides = args.override
    if not (args.dir or settings.base_dir):
        # Discovered readers are rooted elsewhere; typed names are cwd-relative
        primary = _from_cwd(primary) if primary else None
        overrides = [_from_cwd(name) for name in overrides]

    try:
        store.load(
            primary,
            override_with_files=overrides,
            merge_with=supplied,
            is_optional=args.optional,
        )
    except LayerEnvError as e:
        print(json.dumps(e.to_dict()) if getattr(args, "format", "env") == "json" else str(e), file=sys.stderr)
        return 2

    if args.command == "show":
        env = store.env
        if args.format == "json":
            print(json.dumps(env, indent=2, sort_keys=True))
        else:
            for key in sorted(env):
                print(format_env_line(key, env[key]))
        return 0

    missing = [name for name in args.require if not store.is_every_defined([name])]
    if missing:
        print(f"Missing or empty: {', '.join(missing)}", file=sys.stderr)
        return 1
    print(f"All {len(args.require)} required variables are defined")
    return 0


if __name__ == "__main__":
    sys.exit(main())
