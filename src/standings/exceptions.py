"""Custom exception hierarchy for the standings parser.

Exception tree:
    StandingsError
    +-- LineFormatError      (one candidate line could not be turned into a record)
    |   +-- StatBlockNotFound  (no statistic block could be located)
    |   +-- FieldParseError    (a count field is not an integer)
    +-- CorpusError          (a saved page could not be read or decoded)
    +-- AllowListError       (allow-list file missing or empty)
"""

from typing import Optional


class StandingsError(Exception):
    """Base exception for all standings errors."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[str] = None,
        path: Optional[str] = None,
    ):
        self.line = line
        self.path = path
        super().__init__(message)


class LineFormatError(StandingsError):
    """A candidate line could not be normalized into a record.

    Always local to a single line -- the parser drops the line and keeps
    going. Never escapes ``StandingsParser.parse()``.
    """

    pass


class StatBlockNotFound(LineFormatError):
    """The trailing statistic block could not be located in the line."""

    pass


class FieldParseError(LineFormatError):
    """A field that must be an integer (rank, played, wins, ...) is not."""

    def __init__(self, message: str, *, field: str, value: str, line: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(message, line=line)


class CorpusError(StandingsError):
    """A saved page could not be read or decoded into a line corpus."""

    pass


class AllowListError(StandingsError):
    """The allow-list file is missing, unreadable, or has no entries."""

    pass
