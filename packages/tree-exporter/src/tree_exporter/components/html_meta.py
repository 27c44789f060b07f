"""
Lightweight <title> and sitemap <meta> extraction for HTML pages.

Plain pattern matching, not an HTML parser: the first literal <title> pair
and the first sitemap meta tag win.
"""

import re
from pathlib import Path
from typing import NamedTuple, Optional

NO_SITEMAP = "none"

_TITLE_RE = re.compile(r"<title>(.*?)</title>", re.IGNORECASE)
_SITEMAP_RE = re.compile(
    r"""<meta\s+name=["']sitemap["']\s+content=["'](.*?)["']""",
    re.IGNORECASE,
)


class HtmlMeta(NamedTuple):
    title: Optional[str]
    sitemap: str


def extract_html_meta(source: str) -> HtmlMeta:
    """Pull the page title and sitemap marker out of *source*."""
    title_match = _TITLE_RE.search(source)
    sitemap_match = _SITEMAP_RE.search(source)

    title = title_match.group(1).strip() if title_match else None
    sitemap = sitemap_match.group(1).lower() if sitemap_match else NO_SITEMAP
    return HtmlMeta(title=title, sitemap=sitemap)


def read_html_meta(path: Path) -> HtmlMeta:
    """
    Read *path* as UTF-8 and extract its metadata.

    Raises:
        OSError: The file could not be read.
        UnicodeDecodeError: The file is not valid UTF-8 text.
    """
    source = path.read_text(encoding="utf-8")
    return extract_html_meta(source)
