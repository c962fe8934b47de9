"""
CLI entry point for Storefront Facets.

Usage:
    python -m storefront.facets --catalog shirts.csv --color Red --size Medium
    python -m storefront.facets --sample 50000 --seed 7 --color Blue --output-csv blue.csv
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG, load_config
from .loader import load_catalog
from .models import Color, SearchOptions, Size
from .report import export_counts_csv, export_csv, format_console, generate_report_filename
from .sample_data import SampleDataBuilder
from .search import SearchEngine


def _color_arg(raw: str) -> Color:
    try:
        return Color.parse(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _size_arg(raw: str) -> Size:
    try:
        return Size.parse(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storefront.facets",
        description="Faceted shirt search - filter by color and size, count every facet",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--catalog",
        metavar="FILE",
        help="Shirt catalog file (CSV, JSON or XLSX)",
    )
    source.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Generate N random shirts instead of loading a catalog",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --sample",
    )

    parser.add_argument(
        "--color",
        action="append",
        type=_color_arg,
        default=[],
        help="Wanted color (repeatable)",
    )

    parser.add_argument(
        "--size",
        action="append",
        type=_size_arg,
        default=[],
        help="Wanted size (repeatable)",
    )

    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Facet config JSON (default: every color and size)",
    )

    parser.add_argument(
        "--output-csv",
        nargs="?",
        const="",
        metavar="FILE",
        help="Write matched shirts to CSV (default name: facet_search_<date>.csv)",
    )

    parser.add_argument(
        "--output-counts-csv",
        nargs="?",
        const="",
        metavar="FILE",
        help="Write facet counts to CSV (default name: facet_counts_<date>.csv)",
    )

    parser.add_argument(
        "--show-items",
        action="store_true",
        help="List every matched shirt in console output",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress console output (only output CSV)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG

        if args.catalog:
            if not args.quiet:
                print(f"Loading catalog from {args.catalog}...")
            shirts = load_catalog(args.catalog)
        else:
            shirts = SampleDataBuilder(args.sample, seed=args.seed, config=config).create_shirts()

        engine = SearchEngine(shirts, config)
        if not args.quiet:
            print(f"Indexed {engine.index.record_count} shirts "
                  f"({len(engine.index.valid_combinations)} color/size combinations)")

        options = SearchOptions(colors=args.color, sizes=args.size)
        results = engine.search(options)

        if not args.quiet:
            print(format_console(results, options, show_items=args.show_items))

        if args.output_csv is not None:
            output_path = Path(args.output_csv or generate_report_filename())
            with open(output_path, "w", newline="") as f:
                export_csv(results, output=f)
            if not args.quiet:
                print(f"\nCSV exported to: {output_path}")

        if args.output_counts_csv is not None:
            counts_path = Path(args.output_counts_csv or generate_report_filename("facet_counts"))
            with open(counts_path, "w", newline="") as f:
                export_counts_csv(results, output=f)
            if not args.quiet:
                print(f"Facet counts exported to: {counts_path}")

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
