#!/usr/bin/env python3
"""
Site Builder CLI

Regenerates the station tables in the README and the README section of the
HTML page from the station list.

Usage:
    python -m site_builder
    python -m site_builder --split
    python -m site_builder --root ./site --sort rank

Options:
    --root DIR         Directory holding the data, README and template (default: .)
    --data FILE        Station list (default: list.json)
    --readme FILE      README to update (default: README.MD)
    --template FILE    HTML template to update (default: index.html)
    --split            Render separate free and paid tables
    --sort POLICY      category (free first) or rank (explicit order)
    --strict           Fail on malformed station entries instead of skipping them
    --dry-run          Run every stage without writing any file
"""

import argparse
import sys

from src.station_list.loader import ParseError
from src.station_list.splicer import MarkerNotFoundError
from src.station_list.table import SortPolicy

from .config import BuildConfig
from .core import SiteBuilder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="site-builder",
        description=(
            "Station List Site Builder\n\n"
            "Renders list.json into Markdown tables inside README.MD, then\n"
            "renders the README into the marked region of index.html."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Marker comments:\n"
            "  README.MD   <!-- LISTSTART --> ... <!-- LISTEND -->\n"
            "              or <!-- LISTFREESTART --> ... <!-- LISTFREEEND -->\n"
            "              and <!-- LISTTOLLSTART --> ... <!-- LISTTOLLEND --> with --split\n"
            "  index.html  <!-- READMESTART --> ... <!-- READMEEND -->\n"
            "\n"
            "created_at accepts ISO-8601 dates and date-times, e.g.\n"
            "  2024-01-01, 20240101, 2024-01-01T08:00:00Z, 2024-01-01T08:00:00.12+08:00\n"
            "Values without an offset are taken as UTC.\n"
        ),
    )

    parser.add_argument("--root", default=None, help="Working directory (default: current directory)")
    parser.add_argument("--data", default="list.json", help="Station list file (default: list.json)")
    parser.add_argument("--readme", default="README.MD", help="README file (default: README.MD)")
    parser.add_argument("--template", default="index.html", help="HTML template (default: index.html)")
    parser.add_argument(
        "--split",
        action="store_true",
        help="Render free and paid stations into separate tables",
    )
    parser.add_argument(
        "--sort",
        choices=[p.value for p in SortPolicy],
        default=SortPolicy.CATEGORY.value,
        help="Sort policy: category (free first, newest first) or rank (order field)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed station entries instead of skipping them",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Run the full build without writing any file",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = BuildConfig(
        root=args.root,
        data_file=args.data,
        readme_file=args.readme,
        template_file=args.template,
        split=args.split,
        sort_policy=SortPolicy(args.sort),
        strict=args.strict,
    )
    builder = SiteBuilder(config)

    print("=" * 60)
    print("  SITE BUILDER - Station list to README and HTML")
    print("=" * 60)
    print()

    try:
        result = builder.build(save=not args.dry_run)
    except (OSError, ParseError, MarkerNotFoundError, RuntimeError) as e:
        stage = builder.failed_stage.label if builder.failed_stage else "build"
        print(f"[ERROR] {stage}: {e}", file=sys.stderr)
        return 1

    print()
    print("-" * 60)
    print(f"  Done: {result.station_count} station(s), {len(result.tables)} table(s)")
    if args.dry_run:
        print("  Dry run: no files written")
    print("-" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
