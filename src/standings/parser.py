"""Standings line parser: text corpus in, ranked StandingsRecord list out.

Provides:
- StandingsParser: select -> split -> normalize pipeline over one corpus
- parse_standings: convenience wrapper with the default allow-list

Pure: no I/O, no module-level state. Malformed candidate lines are
dropped one at a time and never abort the parse. An empty result is a
valid result.

Usage::

    from standings.parser import parse_standings

    records = parse_standings(lines)
    for r in records:
        print(r.rank, r.team, r.points)
"""

import logging
from collections.abc import Iterable

from standings.config import DEFAULT_TEAM_PREFIXES
from standings.exceptions import LineFormatError
from standings.normalizer import StandingsRecord, normalize
from standings.selector import LineSelector
from standings.splitter import LAYOUT_TYPED, LAYOUTS, split_line

logger = logging.getLogger(__name__)


class StandingsParser:
    """Parses league-table rows out of a rendered-text corpus.

    Args:
        allow_list: Team-name prefixes that qualify a line as a table row.
        layout: Statistic block layout, ``"typed"`` or ``"positional"``.
    """

    def __init__(
        self,
        allow_list: Iterable[str] = DEFAULT_TEAM_PREFIXES,
        layout: str = LAYOUT_TYPED,
    ):
        if layout not in LAYOUTS:
            raise ValueError(
                f"Unknown block layout {layout!r}, expected one of {LAYOUTS}"
            )
        self.selector = LineSelector(allow_list)
        self.layout = layout

    def parse(self, corpus: Iterable[str]) -> list[StandingsRecord]:
        """Parse a corpus of text lines into records sorted by rank.

        Args:
            corpus: Iterable of text lines (a list, a generator, a file
                object). A bare ``str`` is rejected.

        Returns:
            Records sorted ascending by rank. Empty if no line qualified.

        Raises:
            TypeError: If ``corpus`` is a string, not iterable, or yields
                something other than strings.
        """
        records: list[StandingsRecord] = []
        dropped = 0

        for line in self.selector.select(_checked_lines(corpus)):
            try:
                records.append(normalize(split_line(line, self.layout)))
            except LineFormatError as e:
                dropped += 1
                logger.debug("Dropping line %r: %s", line, e)

        records.sort(key=lambda r: r.rank)

        if dropped:
            logger.info(
                "Parsed %d standings rows, dropped %d malformed candidate lines",
                len(records),
                dropped,
            )
        else:
            logger.debug("Parsed %d standings rows", len(records))

        return records


def parse_standings(
    corpus: Iterable[str],
    allow_list: Iterable[str] = DEFAULT_TEAM_PREFIXES,
    layout: str = LAYOUT_TYPED,
) -> list[StandingsRecord]:
    """Parse a corpus with a one-off StandingsParser."""
    return StandingsParser(allow_list, layout=layout).parse(corpus)


def _checked_lines(corpus: Iterable[str]) -> Iterable[str]:
    """Yield lines from ``corpus``, enforcing the sequence-of-str contract."""
    if isinstance(corpus, (str, bytes)):
        raise TypeError(
            "corpus must be an iterable of lines, not a single "
            f"{type(corpus).__name__}; split it first"
        )
    try:
        iterator = iter(corpus)
    except TypeError:
        raise TypeError(
            f"corpus must be an iterable of str, got {type(corpus).__name__}"
        ) from None

    for line in iterator:
        if not isinstance(line, str):
            raise TypeError(
                f"corpus lines must be str, got {type(line).__name__}"
            )
        yield line
