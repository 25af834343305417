"""Line corpus extraction from saved pages.

Turns a saved results page into the whitespace-normalized text lines the
parser consumes. HTML is flattened to its ``<body>`` text (script and
style contents removed) and split on newlines; no table structure is
inspected. Plain-text dumps are split as-is.

Files ending in ``.gz`` are decompressed first.
"""

import gzip
import logging
import re
from pathlib import Path

from bs4 import BeautifulSoup

from standings.exceptions import CorpusError

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".html", ".htm"}

_WS_RE = re.compile(r"\s+")


def normalize_lines(text: str) -> list[str]:
    """Split text into lines, collapse internal whitespace runs, drop blanks."""
    lines = []
    for raw in text.splitlines():
        line = _WS_RE.sub(" ", raw).strip()
        if line:
            lines.append(line)
    return lines


def lines_from_html(html: str, separator: str = "") -> list[str]:
    """Flatten an HTML page's body text into normalized lines.

    Args:
        html: Raw HTML string.
        separator: Joined between text nodes. The default ``""`` keeps the
            page's own line breaks as the only row boundaries.
    """
    soup = BeautifulSoup(html, "lxml")
    for tag in soup(["script", "style", "noscript", "template"]):
        tag.decompose()

    root = soup.body or soup
    return normalize_lines(root.get_text(separator))


def read_page(path: str | Path) -> str:
    """Read a saved page from disk, decompressing ``.gz`` files.

    Raises:
        CorpusError: If the file cannot be read or decoded as UTF-8.
    """
    p = Path(path)
    try:
        data = p.read_bytes()
        if p.suffix == ".gz":
            data = gzip.decompress(data)
        return data.decode("utf-8")
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read page {p}: {e}", path=str(p)) from e


def is_html_path(path: str | Path) -> bool:
    """True if the path names an HTML page (``page.html``, ``page.htm.gz``, ...)."""
    p = Path(path)
    suffix = Path(p.stem).suffix if p.suffix == ".gz" else p.suffix
    return suffix.lower() in HTML_SUFFIXES


def load_corpus(path: str | Path) -> list[str]:
    """Load a saved page and return its line corpus.

    HTML pages are flattened via :func:`lines_from_html`; anything else is
    treated as a plain-text dump.
    """
    text = read_page(path)
    if is_html_path(path):
        lines = lines_from_html(text)
    else:
        lines = normalize_lines(text)
    logger.debug("Loaded %d lines from %s", len(lines), path)
    return lines
