"""Command line interface for the module header generator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from .config import ModuleContext
from .errors import ConfigError, ScaffoldError
from .naming import GuardStyle
from .scaffold import ModuleScaffolder

LOGGER = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="cmodgen",
        description="Create guarded consts/types/inlines headers for a C module",
    )
    parser.add_argument("-name", "--name", default=None, help="module (parent dir) name")
    parser.add_argument(
        "-dir",
        "--dir",
        dest="use_dir",
        action="store_true",
        help="use the current directory name as module name",
    )
    parser.add_argument("-once", "--once", action="store_true", help="add #pragma once to includes")
    parser.add_argument(
        "-pub",
        "--pub",
        dest="public_only",
        action="store_true",
        help="generate the public tier only",
    )
    parser.add_argument(
        "-add",
        "--add",
        metavar="PREFIX",
        default=None,
        help="generate a single tier named by PREFIX instead of pub/priv",
    )
    parser.add_argument(
        "-legacy",
        "--legacy",
        action="store_true",
        help="use the fixed pipeline with <prefix>_includes.h collector headers",
    )
    parser.add_argument(
        "-digits",
        "--digits",
        action="store_true",
        help="keep digits in include guard tokens",
    )
    parser.add_argument(
        "-strict",
        "--strict",
        action="store_true",
        help="fail when two generated headers would share an include guard",
    )
    parser.add_argument(
        "-dry-run",
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="print the planned files and their includes without writing",
    )
    parser.add_argument("-v", "-verbose", "--verbose", action="store_true", help="log every step")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _handle(args: argparse.Namespace) -> int:
    context = ModuleContext.resolve(
        name=args.name,
        use_dir=args.use_dir,
        once=args.once,
        public_only=args.public_only,
        add=args.add,
        guard_style=GuardStyle.DIGITS if args.digits else GuardStyle.LETTERS,
        template="legacy" if args.legacy else "modern",
        strict=args.strict,
    )
    scaffolder = ModuleScaffolder(context)
    if args.dry_run:
        for line in scaffolder.describe():
            print(line)
        return 0
    scaffolder.create()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)
        return _handle(args)
    except ScaffoldError as exc:
        LOGGER.debug("aborting", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
