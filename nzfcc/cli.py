"""
NZFCC Command Line

Generates the CategoryGroup / NzfccCode module from a taxonomy snapshot and
inspects the taxonomy it describes.

Usage:
    python -m nzfcc.cli generate [--output PATH]   # Write the generated module
    python -m nzfcc.cli groups                     # List category groups
    python -m nzfcc.cli codes [--group NAME]       # List codes, optionally of one group
    python -m nzfcc.cli lookup NAME                # Resolve a display name

    Pass --snapshot PATH before the command to override NZFCC_SNAPSHOT_PATH.

Update the snapshot by running:
    wget https://nzfcc.org/downloads/categories.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from nzfcc.core.config import Settings, load_settings
from nzfcc.core.exceptions import NzfccError, ParseCategoryGroupError, ParseNzfccCodeError
from nzfcc.core.logging import LogContext, get_logger, setup_logging
from nzfcc.repositories.snapshot_repo import SnapshotRepository
from nzfcc.services.codegen import render_module
from nzfcc.services.registry import build_taxonomy
from nzfcc.services.synthesizer import Taxonomy

logger = get_logger("nzfcc.cli")


def _repo(args: argparse.Namespace, settings: Settings) -> SnapshotRepository:
    return SnapshotRepository(
        args.snapshot or settings.snapshot_path,
        getattr(args, "output", None) or settings.generated_path,
    )


def cmd_generate(repo: SnapshotRepository) -> None:
    """Render the taxonomy module and write it to the output path."""
    with LogContext(logger, "generate", snapshot=str(repo.snapshot_path), output=str(repo.generated_path)):
        taxonomy = build_taxonomy(repo)
        path = repo.write_generated(render_module(taxonomy.tables))

    print(f"Wrote {path}")
    print(f"  {len(taxonomy.CategoryGroup)} category groups")
    print(f"  {len(taxonomy.NzfccCode)} NZFCC codes")


def cmd_groups(taxonomy: Taxonomy) -> None:
    """List all category groups."""
    for group in taxonomy.CategoryGroup:
        print(f"  {group.id():<40} {group.name:<30} {group} ({len(group.codes())} codes)")


def cmd_codes(taxonomy: Taxonomy, group_name: str | None) -> None:
    """List NZFCC codes, optionally restricted to one group."""
    if group_name is not None:
        codes = taxonomy.CategoryGroup.parse(group_name).codes()
    else:
        codes = taxonomy.NzfccCode.values()

    for code in codes:
        print(f"  {code.id():<40} {code.name:<40} {code} [{code.group()}]")


def cmd_lookup(taxonomy: Taxonomy, name: str) -> None:
    """Resolve a display name as a code, falling back to a group."""
    try:
        code = taxonomy.NzfccCode.parse(name)
    except ParseNzfccCodeError:
        group = taxonomy.CategoryGroup.parse(name)
        print(f"group  {group.id()}  {group.name}  ({len(group.codes())} codes)")
        return
    print(f"code   {code.id()}  {code.name}  group={code.group().id()} ({code.group()})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nzfcc", description="NZFCC taxonomy code generator")
    parser.add_argument("--snapshot", type=Path, help="Path to categories.json")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # generate command
    generate_parser = subparsers.add_parser("generate", help="Generate the taxonomy module")
    generate_parser.add_argument("--output", type=Path, help="Where to write the module")

    # groups command
    subparsers.add_parser("groups", help="List category groups")

    # codes command
    codes_parser = subparsers.add_parser("codes", help="List NZFCC codes")
    codes_parser.add_argument("--group", help="Group display name (e.g. 'Lifestyle')")

    # lookup command
    lookup_parser = subparsers.add_parser("lookup", help="Resolve a display name")
    lookup_parser.add_argument("name", help="Code or group display name")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)
    repo = _repo(args, settings)

    try:
        if args.command == "generate":
            cmd_generate(repo)
            return 0

        taxonomy = build_taxonomy(repo)
        if args.command == "groups":
            cmd_groups(taxonomy)
        elif args.command == "codes":
            cmd_codes(taxonomy, args.group)
        elif args.command == "lookup":
            cmd_lookup(taxonomy, args.name)
    except ParseCategoryGroupError as e:
        print(f"Unknown name: {e.value}", file=sys.stderr)
        return 1
    except NzfccError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
