"""
codeup-migrate command line

Inspect the migrations a Codeup source exposes:

    codeup-migrate list "codeup://endpoint/db/migrations?projectId=..&organizationId=..&accessToken=.."
    codeup-migrate show "codeup://..." 3 --down

Credentials missing from the URL are read from the environment, which may
be populated from a ``.env`` file.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from .exceptions import CodeupMigrateError
from .logging_config import configure_logging
from .source import CodeupSource, SourceRegistry, register_codeup

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeup-migrate",
        description="Inspect migrations stored in a Codeup repository",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List migration versions")
    list_parser.add_argument("url", help="codeup:// source URL")

    show_parser = subparsers.add_parser("show", help="Print one migration body")
    show_parser.add_argument("url", help="codeup:// source URL")
    show_parser.add_argument("version", type=int, help="Migration version")
    show_parser.add_argument("--down", action="store_true", help="Print the down migration")

    return parser


def list_migrations(source: CodeupSource) -> None:
    """Print every version with the identifiers of its up and down files."""
    migrations = source.migrations
    for version in migrations.versions():
        up = migrations.up(version)
        down = migrations.down(version)
        up_name = up.raw if up else "-"
        down_name = down.raw if down else "-"
        print(f"{version:>8}  up: {up_name:<40}  down: {down_name}")
    print(f"{len(migrations)} versions")


def show_migration(source: CodeupSource, version: int, down: bool) -> None:
    body, identifier = source.read_down(version) if down else source.read_up(version)
    logger.info(f"Showing migration {version} ({identifier})")
    with body:
        sys.stdout.write(body.read())


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    registry = SourceRegistry()
    register_codeup(registry)

    try:
        source = registry.open(args.url)
        with source:
            if args.command == "list":
                list_migrations(source)
            else:
                show_migration(source, args.version, args.down)
    except (CodeupMigrateError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
