#!/usr/bin/env python3
"""Seed the MAS Business OS database with demo data.

Usage:
    mas-seed                              # seed every module
    mas-seed --modules core,users         # seed a subset
    mas-seed --reset --force              # clear, then seed, no prompt
    mas-seed --dry-run --verbose          # show what would be written
    mas-seed list                         # modules, collections, record counts
    mas-seed status                       # which collections hold data

Exit code 0 on success (or a declined production prompt), 1 on any error.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Callable, Sequence

from pymongo.errors import PyMongoError

from mas_seed.config import Settings, get_settings
from mas_seed.models.seed import SeedReport, SeedRunOptions
from mas_seed.pipelines.seed_pipeline import SeedPipeline
from mas_seed.seeds.registry import SEED_MODULES, describe_modules, validate_registry
from mas_seed.services.document_store import DocumentStore
from mas_seed.services.mongo_service import MongoService

logger = logging.getLogger(__name__)

StoreFactory = Callable[[Settings], DocumentStore]

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mas-seed",
        description="Seed MAS Business OS database with demo data",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["seed", "list", "status"],
        default="seed",
        help="seed (default), list available modules, or show collection status",
    )
    parser.add_argument(
        "-m", "--modules",
        help="Comma-separated modules to seed (default: all)",
    )
    parser.add_argument("-r", "--reset", action="store_true", help="Clear collections before seeding")
    parser.add_argument("-d", "--dry-run", action="store_true", help="Show what would be done without writing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log a sample record per collection")
    parser.add_argument("-f", "--force", action="store_true", help="Skip the production confirmation prompt")
    parser.add_argument(
        "-o", "--organization",
        dest="organization_id",
        help="Stamp organizationId on every record that lacks one",
    )
    return parser


def _parse_modules(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [name.strip() for name in raw.split(",") if name.strip()]


def _make_confirm(prompt: Callable[[str], str]) -> Callable[[str], bool]:
    def confirm(message: str) -> bool:
        try:
            answer = prompt(f"{message} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes"}

    return confirm


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _print_modules() -> None:
    print(f"\n{'='*60}")
    print("  Available seed modules")
    print(f"{'='*60}")
    for summary in describe_modules(SEED_MODULES):
        print(f"  {summary.name:15s} {summary.total_records:5d} records")
        print(f"    {summary.description}")
        print(f"    Collections: {', '.join(summary.collections)}")
    print(f"{'='*60}\n")


def _print_header(settings: Settings, options: SeedRunOptions) -> None:
    print(f"\n{'='*60}")
    print("  MAS Business OS Database Seeder")
    print(f"{'='*60}")
    print(f"  Project      : {settings.PROJECT_ID}")
    print(f"  Environment  : {settings.ENVIRONMENT}")
    print(f"  Database     : {settings.database_name}")
    print(f"  Modules      : {', '.join(options.modules) if options.modules else 'all'}")
    print(f"  Reset        : {options.reset}")
    print(f"  Dry run      : {options.dry_run}")
    if options.organization_id:
        print(f"  Organization : {options.organization_id}")
    print(f"{'='*60}\n")


def _print_report(report: SeedReport) -> None:
    print(f"\n{'='*60}")
    print("  SEEDING COMPLETE" + (" (dry run)" if report.dry_run else ""))
    print(f"{'='*60}")
    for outcome in report.outcomes:
        verb = "cleared" if outcome.action == "clear" else "seeded"
        if outcome.dry_run:
            verb = "would clear" if outcome.action == "clear" else "would seed"
        print(f"  {outcome.module:15s} {outcome.collection:22s} {verb} {outcome.records}")
    print(f"{'─'*60}")
    print(f"  Total records : {report.total_records}")
    if report.total_cleared:
        print(f"  Cleared       : {report.total_cleared}")
    print(f"{'='*60}\n")


async def _print_status(pipeline: SeedPipeline) -> None:
    print(f"\n{'='*60}")
    print(f"  Collection status: {pipeline.settings.PROJECT_ID}")
    print(f"{'='*60}")
    current = None
    for status in await pipeline.status():
        if status.module != current:
            current = status.module
            print(f"  {current}")
        if status.error:
            state = f"error ({status.error})"
        elif status.has_data:
            state = f"{status.count} documents"
        else:
            state = "empty"
        print(f"    {status.collection:22s} {state}")
    print(f"{'='*60}\n")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

async def _execute(
    args: argparse.Namespace,
    settings: Settings,
    store_factory: StoreFactory,
    prompt: Callable[[str], str],
) -> int:
    store = store_factory(settings)
    pipeline = SeedPipeline(store, settings, confirm=_make_confirm(prompt))
    try:
        if args.command == "status":
            await _print_status(pipeline)
            return 0

        options = SeedRunOptions(
            modules=_parse_modules(args.modules),
            reset=args.reset,
            dry_run=args.dry_run,
            verbose=args.verbose,
            force=args.force,
            organization_id=args.organization_id,
        )
        _print_header(settings, options)
        report = await pipeline.run(options)
        if report.cancelled:
            print("Seeding cancelled.")
            return 0
        _print_report(report)
        return 0
    finally:
        await store.close()


def main(
    argv: Sequence[str] | None = None,
    *,
    store_factory: StoreFactory | None = None,
    settings: Settings | None = None,
    prompt: Callable[[str], str] = input,
) -> int:
    """Entry point for ``mas-seed``; returns the process exit code."""
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as exc:
        # argparse exits 2 on usage errors and 0 after --help
        return 0 if exc.code in (0, None) else 1
    settings = settings or get_settings()

    level = logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    try:
        validate_registry(SEED_MODULES)
        if args.command == "list":
            _print_modules()
            return 0

        if not settings.PROJECT_ID:
            print("Error: PROJECT_ID environment variable is required")
            return 1

        return asyncio.run(
            _execute(args, settings, store_factory or MongoService.from_settings, prompt)
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    except PyMongoError as exc:
        logger.error("Database operation failed: %s", exc)
        print(f"Error: database operation failed: {exc}")
        return 1
    except Exception as exc:
        logger.exception("Seeding failed")
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
