"""Line selection: keep only corpus lines that look like table rows.

A row starts with the rank (one or more digits), whitespace, then a
team-name prefix from the injected allow-list. Everything else on the
page (navigation, ads, match reports) is dropped without complaint.
"""

import logging
import re
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


def _prefix_pattern(prefix: str) -> str:
    """Regex fragment for one allow-list prefix.

    The prefix is matched literally, except a trailing ``*`` which means
    "at least one more character" (``Mind*`` covers Minden and Mindener).
    """
    if prefix.endswith("*"):
        return re.escape(prefix[:-1]) + ".+"
    return re.escape(prefix)


class LineSelector:
    """Filters a text corpus down to candidate table rows.

    The allow-list is frozen into a compiled pattern at construction; an
    instance holds no other state and can be shared freely.
    """

    def __init__(self, allow_list: Iterable[str]):
        if isinstance(allow_list, (str, bytes)):
            raise TypeError(
                "allow_list must be an iterable of prefixes, "
                f"not a single {type(allow_list).__name__}"
            )
        prefixes = tuple(p.strip() for p in allow_list if p and p.strip())
        self._prefixes = prefixes
        if prefixes:
            alternatives = "|".join(_prefix_pattern(p) for p in prefixes)
            self._pattern: re.Pattern[str] | None = re.compile(
                rf"^\d+\s+(?:{alternatives})", re.IGNORECASE
            )
        else:
            self._pattern = None

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def matches(self, line: str) -> bool:
        """True if the trimmed line is a candidate table row."""
        if self._pattern is None:
            return False
        return self._pattern.match(line.strip()) is not None

    def select(self, corpus: Iterable[str]) -> Iterator[str]:
        """Yield trimmed candidate lines in input order."""
        kept = 0
        seen = 0
        for fragment in corpus:
            seen += 1
            line = fragment.strip()
            if self._pattern is not None and self._pattern.match(line):
                kept += 1
                yield line
        logger.debug("Selected %d candidate lines out of %d", kept, seen)
