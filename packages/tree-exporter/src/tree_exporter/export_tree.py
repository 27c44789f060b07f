"""
TreeExporter - scans a project directory and writes a flat "master data" list
of every folder and file in it.

Each entry looks like:

{
  "name": <base name of the file or folder>,
  "path": <path relative to the scanned root, "/"-separated>,
  "type": "folder" | "file",
  "ext": <lowercased extension with leading dot, null for folders>,
  "size": <size in bytes, null for folders>,
  "title": <first <title> of an .html page, else null>,
  "sitemap": <lowercased sitemap meta value or "none" for .html pages, else null>,
  "category": <markup, image, script, ... or "unknown"; null for folders>
}

Usage (CLI):
    export-tree [<directory>] [--output <file.json>] [--stdout]

Usage (library):
    from tree_exporter.export_tree import export_tree
    result = export_tree("/path/to/project")
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tree_exporter.components.node import ScanResult
from tree_exporter.components.scanner import scan_directory
from tree_exporter.components.writer import write_tree
from tree_exporter.config import settings

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_tree(root: str | Path) -> ScanResult:
    """Scan *root* and return the entries without writing anything."""
    return scan_directory(root)


def export_tree(
    root: str | Path | None = None,
    output: str | Path | None = None,
) -> ScanResult:
    """
    Scan *root* (default: the current working directory) and write the
    entries to *output* (default: ``<root>/assets/data/tree.json``).
    """
    root = Path(root) if root is not None else Path.cwd()
    output = Path(output) if output is not None else root / settings.output_path

    logger.info("Scanning project directory: %s", root)
    result = build_tree(root)
    written = write_tree(result.records(), output, indent=settings.json_indent)

    logger.info("JSON export complete. Output written to: %s", written)
    report(result)
    return result


def report(result: ScanResult) -> None:
    """Log the run summary and one line per HTML file that could not be parsed."""
    for warning in result.warnings:
        logger.warning("Failed to parse HTML metadata in: %s (%s)", warning.path, warning.message)

    logger.info("Folders found: %d", result.folders)
    logger.info("Files found: %d", result.files)
    logger.info("Parse warnings: %d", result.parse_warnings)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Recursively scan a project directory and export its file tree as JSON."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Root directory to scan (default: current working directory)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help=f"Write JSON output to FILE instead of <directory>/{settings.output_path}",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print JSON to stdout instead of writing a file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Logging level (default: {settings.log_level})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(message)s",
    )

    try:
        if args.stdout:
            result = build_tree(args.directory or Path.cwd())
            print(json.dumps(result.records(), indent=settings.json_indent, ensure_ascii=False))
            report(result)
        else:
            export_tree(args.directory, args.output)
    except OSError as e:
        logger.error("Export failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
