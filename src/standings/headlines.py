"""Headline filter for league news.

Keeps candidate headline strings that mention one of the configured
keywords (case-insensitive substring match), in input order, up to a
limit.
"""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from standings.config import DEFAULT_NEWS_KEYWORDS

logger = logging.getLogger(__name__)

NEWS_META = "Handball-Bundesliga"
NEWS_TEXT = "Aktuelle HBL-Meldung (Transfers, Verletzungen, Topspiele, Trainer-Themen)."


@dataclass(frozen=True)
class NewsItem:
    headline: str
    meta: str = NEWS_META
    text: str = NEWS_TEXT

    def to_dict(self) -> dict:
        return asdict(self)


def filter_headlines(
    headlines: Iterable[str],
    keywords: Iterable[str] = DEFAULT_NEWS_KEYWORDS,
    limit: int | None = 5,
) -> list[NewsItem]:
    """Return the first ``limit`` headlines matching any keyword.

    Args:
        headlines: Candidate headline strings. Surrounding whitespace is
            stripped; blank entries are skipped.
        keywords: Substrings to look for, case-insensitively.
        limit: Maximum number of items, or None for no cap.
    """
    needles = [k.casefold() for k in keywords if k]
    items: list[NewsItem] = []

    for raw in headlines:
        # a zero or negative limit keeps nothing
        if limit is not None and len(items) >= limit:
            break
        headline = raw.strip()
        if not headline:
            continue
        folded = headline.casefold()
        if any(n in folded for n in needles):
            items.append(NewsItem(headline=headline))

    logger.debug("Kept %d headlines", len(items))
    return items
