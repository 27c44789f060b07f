from .categories import CATEGORY_MAP, categorize
from .html_meta import HtmlMeta, extract_html_meta, read_html_meta
from .node import Entry, EntryType, ParseWarning, ScanResult
from .scanner import scan_directory
from .writer import write_tree

__all__ = [
    "CATEGORY_MAP",
    "Entry",
    "EntryType",
    "HtmlMeta",
    "ParseWarning",
    "ScanResult",
    "categorize",
    "extract_html_meta",
    "read_html_meta",
    "scan_directory",
    "write_tree",
]
