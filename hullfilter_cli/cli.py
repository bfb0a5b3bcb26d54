"""
hullfilter CLI - Main entry point.

Provides a command-line interface for filtering convex hull documents.
"""

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from hullfilter_core.analytics.overlap import OverlapFilter, OverlapReport
from hullfilter_core.geometry.hull import InvalidPolygonError
from hullfilter_io import (
    HullDocument,
    LogEvent,
    SchemaValidationError,
    create_logger,
    dump_document,
    load_document,
)

from .config import FilterConfig


def load_config(args: argparse.Namespace) -> FilterConfig:
    """
    Build the run configuration from an optional YAML file plus flags.

    Args:
        args: Parsed command-line arguments

    Returns:
        Validated FilterConfig
    """
    config = FilterConfig.from_yaml(Path(args.config)) if args.config else FilterConfig()
    return config.with_overrides(
        input_path=getattr(args, "input", None),
        output_path=getattr(args, "output", None),
        overlap_threshold=args.threshold,
        max_workers=args.workers,
        log_level=args.log_level,
    )


def run_filter(config: FilterConfig) -> OverlapReport:
    """
    Load hulls, filter them and write the survivors.

    Args:
        config: Run configuration

    Returns:
        Report of the filter run
    """
    logger = create_logger("cli", level=config.logging_level)
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Configuration loaded",
        metadata={
            'input_path': str(config.input_path),
            'output_path': str(config.output_path),
            'overlap_threshold': config.overlap_threshold,
        }
    )

    document = load_document(config.input_path, key=config.input_key, logger=logger)
    hulls = document.to_hulls()

    overlap_filter = OverlapFilter(
        threshold=config.overlap_threshold,
        max_workers=config.max_workers,
        logger=create_logger("filter", level=config.logging_level),
    )
    report = overlap_filter.evaluate(hulls)
    survivors = [hull for hull, keep in zip(hulls, report.kept_mask) if keep]

    dump_document(
        HullDocument.from_hulls(survivors),
        config.output_path,
        key=config.output_key,
        indent=config.indent,
        logger=logger,
    )
    return report


def format_report(report: OverlapReport) -> str:
    """One line per hull: ID, ratio, decision."""
    lines = [f"{'ID':>8}  {'ratio':>10}  decision"]
    for decision in report.decisions:
        ratio = "inf" if math.isinf(decision.ratio) else f"{decision.ratio:.6f}"
        lines.append(
            f"{decision.hull_id:>8}  {ratio:>10}  "
            f"{'kept' if decision.kept else 'dropped'}"
        )
    lines.append(
        f"kept {len(report.kept_ids)} of {len(report)} "
        f"(threshold {report.threshold})"
    )
    return "\n".join(lines)


def error_event(error: Exception) -> LogEvent:
    """Log event for an error that ends a command."""
    if isinstance(error, InvalidPolygonError):
        return LogEvent.INVALID_POLYGON_ERROR
    if isinstance(error, SchemaValidationError):
        return LogEvent.SCHEMA_VALIDATION_ERROR
    if isinstance(error, OSError):
        return LogEvent.IO_ERROR
    return LogEvent.CONFIG_ERROR


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the hullfilter command."""
    parser = argparse.ArgumentParser(
        prog="hullfilter",
        description="hullfilter - Drop convex hulls that overlap others too much",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Filter convex_hulls.json into result_convex_hulls.json
  hullfilter filter

  # Explicit paths and threshold
  hullfilter --threshold 0.3 filter hulls.json -o kept.json

  # Settings from YAML
  hullfilter --config config/filter.yaml filter

  # Print per-hull overlap ratios without writing anything
  hullfilter ratios hulls.json
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML run configuration"
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Maximum accumulated overlap ratio to keep a hull (default: 0.5)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread pool size for ratio computation (default: 1)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # filter command
    filter_cmd = subparsers.add_parser('filter', help='Filter a hull document')
    filter_cmd.add_argument('input', nargs='?', default=None, help='Input JSON document')
    filter_cmd.add_argument('-o', '--output', default=None, help='Output JSON document')

    # ratios command
    ratios_cmd = subparsers.add_parser('ratios', help='Print per-hull overlap ratios')
    ratios_cmd.add_argument('input', nargs='?', default=None, help='Input JSON document')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Execute command
    try:
        config = load_config(args)

        if args.command == 'filter':
            report = run_filter(config)
            print(
                f"Kept {len(report.kept_ids)} of {len(report)} hulls -> "
                f"{config.output_path}"
            )

        elif args.command == 'ratios':
            hulls = load_document(config.input_path, key=config.input_key).to_hulls()
            overlap_filter = OverlapFilter(
                threshold=config.overlap_threshold,
                max_workers=config.max_workers,
                logger=create_logger("filter", level=config.logging_level),
            )
            print(format_report(overlap_filter.evaluate(hulls)))

    except (SchemaValidationError, ValueError, OSError) as e:
        logger = create_logger("cli", level=getattr(logging, args.log_level or "INFO"))
        logger.error(
            event=error_event(e),
            message="Command failed",
            metadata={'command': args.command},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
