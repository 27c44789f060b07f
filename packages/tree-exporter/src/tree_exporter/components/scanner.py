import logging
import os
from pathlib import Path

from .categories import categorize
from .html_meta import read_html_meta
from .node import Entry, EntryType, ParseWarning, ScanResult

logger = logging.getLogger(__name__)

HTML_EXT = ".html"


def scan_directory(root: str | Path) -> ScanResult:
    """
    Recursively scan a directory and return a flat, pre-ordered list of
    entries describing every folder and file below it.

    Args:
        root: Absolute or relative path to the root directory to scan.
              The root itself is not recorded.

    Returns:
        A ScanResult holding the entries plus folder, file and warning counts.

    Raises:
        FileNotFoundError: If *root* does not exist.
        NotADirectoryError: If *root* is not a directory.
        OSError: If any directory below *root* cannot be listed.
    """
    root = Path(root).resolve()
    if not root.exists():
        raise FileNotFoundError(f"Scan root not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Scan root is not a directory: {root}")

    result = ScanResult()
    _walk(root, "", result)
    logger.debug(
        "Scanned %s: %d folders, %d files, %d parse warnings",
        root,
        result.folders,
        result.files,
        result.parse_warnings,
    )
    return result


def _walk(directory: Path, rel_dir: str, result: ScanResult) -> None:
    # Listing order is kept as-is; only parent-before-children is guaranteed.
    # Links are typed by the listing itself and never descended into.
    with os.scandir(directory) as listing:
        for dir_entry in listing:
            rel_path = f"{rel_dir}/{dir_entry.name}" if rel_dir else dir_entry.name

            if dir_entry.is_dir(follow_symlinks=False):
                result.folders += 1
                result.entries.append(Entry.folder(dir_entry.name, rel_path))
                _walk(Path(dir_entry.path), rel_path, result)
            else:
                result.files += 1
                result.entries.append(_file_entry(dir_entry, rel_path, result))


def _file_entry(dir_entry: os.DirEntry, rel_path: str, result: ScanResult) -> Entry:
    ext = os.path.splitext(dir_entry.name)[1].lower() or None
    size = dir_entry.stat().st_size

    title = None
    sitemap = None
    if ext == HTML_EXT:
        try:
            title, sitemap = read_html_meta(Path(dir_entry.path))
        except (OSError, ValueError) as e:
            result.warnings.append(ParseWarning(path=rel_path, message=str(e)))
            logger.debug("HTML metadata unreadable for %s: %s", rel_path, e)

    return Entry(
        name=dir_entry.name,
        path=rel_path,
        type=EntryType.FILE,
        ext=ext,
        size=size,
        title=title,
        sitemap=sitemap,
        category=categorize(ext),
    )
