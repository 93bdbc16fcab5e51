"""Command line entry point.

Usage::

    dynamo-new [-v] PATH [--app APP] [--module MODULE] [--dev]

A project at the given PATH will be created.  The application name and
module name are taken from the path unless ``--app`` or ``--module`` is
given, so ``dynamo-new hello_world`` is equivalent to
``dynamo-new hello_world --app hello_world --module HelloWorld``.
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from dynamo_new.config import GeneratorConfig
from dynamo_new.scaffolder import InvalidNameError, ProjectGenerator, ScaffoldError
from dynamo_new.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynamo-new",
        description="Create a new Dynamo project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  dynamo-new hello_world\n"
            "  dynamo-new hello_world --app hello_world --module HelloWorld\n"
            "  dynamo-new -v\n"
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Directory to create the project in",
    )
    parser.add_argument(
        "--app",
        default=None,
        help="Application name (default: last component of PATH)",
    )
    parser.add_argument(
        "--module",
        default=None,
        help="Module name (default: camelized application name)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Depend on the local Dynamo checkout instead of git",
    )
    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Print the Dynamo version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``dynamo-new`` and ``python -m dynamo_new``."""
    args = build_parser().parse_args(argv)
    config = GeneratorConfig.from_env()

    if args.version:
        console.print(f"Dynamo v{escape(config.version)}")
        return

    if not args.path:
        print_error("expected PATH to be given, please use `dynamo-new PATH`")
        sys.exit(1)

    generator = ProjectGenerator(config)
    try:
        report = generator.generate(
            args.path, app=args.app, module=args.module, dev=args.dev
        )
    except InvalidNameError as exc:
        print_error(str(exc))
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    console.print()
    print_summary_table(
        {
            "Application": report.context.app,
            "Module": report.context.mod,
            "Dynamo": report.context.dynamo,
            "Destination": str(report.root.resolve()),
            "Created": str(len(report.created)),
            "Skipped": str(len(report.skipped)),
        },
        title="dynamo-new",
    )
    if report.has_conflicts:
        print_warning(
            f"{len(report.skipped)} existing file(s) were left untouched: "
            + ", ".join(report.skipped)
        )
    else:
        print_success(f"Your Dynamo project was created at {args.path}")


if __name__ == "__main__":
    main()
