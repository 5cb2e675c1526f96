"""Command line interface for generating GetX feature pages."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .config import FeatureConfig
from .errors import EmptyNameError, UsageError
from .report import render_tree
from .scaffold import FeatureScaffolder
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)

EPILOG = """\
Accepts PascalCase, camelCase, snake_case, kebab-case or space separated
words. Acronyms are preserved in class names (MyHTTPPage -> MyHTTPPage).

examples:
  getx ForgotPassword
  getx -f my-http-page
  getx "reset password"
"""


class _ParserExit(Exception):
    """Raised instead of exiting once ``--help`` has been printed."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that never exits the interpreter itself.

    Problems are reported as :class:`UsageError` and a finished ``--help``
    as :class:`_ParserExit`, so :func:`main` can return the exit status.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            self._print_message(message, sys.stderr)
        raise _ParserExit(status)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="getx",
        description="Generate a GetX page skeleton with correct naming",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("name", nargs="+", metavar="NAME", help="Feature name, words are joined with spaces")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force overwrite existing files",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show actions without writing",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        help="Directory in which the feature folder is created",
    )
    parser.add_argument(
        "-t",
        "--templates",
        type=Path,
        help="Directory with <role>.dart.tmpl files overriding the built-in templates",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _handle_generate(args: argparse.Namespace) -> int:
    raw_name = " ".join(args.name)
    try:
        config = FeatureConfig.from_name(raw_name)
    except EmptyNameError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    LOGGER.debug("derived %s / %s from %r", config.snake, config.pascal, raw_name)
    scaffolder = FeatureScaffolder(TemplateRenderer(), template_dir=args.templates)
    report = scaffolder.create(
        config,
        args.directory,
        force=args.force,
        dry_run=args.dry_run,
    )

    if not report.dry_run:
        print("Structure:")
        for line in render_tree(report.directory):
            print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2
    except _ParserExit as exc:
        return exc.status

    _configure_logging(args.verbose)
    return _handle_generate(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
