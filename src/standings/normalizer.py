"""Field normalization: typed StandingsRecord from a split line.

Provides:
- normalize: SplitLine in, StandingsRecord out (raises per-line errors)
- normalize_diff: sign-prefix a goal difference token
- pick_points: choose between the two trailing points candidates
- StandingsRecord: the immutable output record
"""

from dataclasses import asdict, dataclass

from standings.exceptions import FieldParseError
from standings.splitter import SplitLine


@dataclass(frozen=True)
class StandingsRecord:
    """One team's row in the league table."""

    rank: int
    team: str
    played: int
    wins: int
    draws: int
    losses: int
    goals: str  # "366:297"
    diff: str  # "+69" / "-5"
    points: str  # "18:2", kept opaque

    def to_dict(self) -> dict:
        return asdict(self)


def normalize(split: SplitLine) -> StandingsRecord:
    """Convert a split line into a StandingsRecord.

    Block slots: ``[played, wins, draws, losses, goals, diff, points_b,
    points_c]``.

    Raises:
        FieldParseError: If rank is not a positive integer or any of the
            four count fields is not a non-negative integer.
    """
    played, wins, draws, losses, goals, diff, points_b, points_c = split.block

    return StandingsRecord(
        rank=_parse_rank(split.rank, split.line),
        team=split.team,
        played=_parse_count("played", played, split.line),
        wins=_parse_count("wins", wins, split.line),
        draws=_parse_count("draws", draws, split.line),
        losses=_parse_count("losses", losses, split.line),
        goals=goals,
        diff=normalize_diff(diff),
        points=pick_points(points_b, points_c),
    )


def normalize_diff(token: str) -> str:
    """Prefix ``+`` unless the token already carries a sign.

    A missing sign is read as positive. Goal arithmetic is never consulted.
    """
    if token.startswith("+") or token.startswith("-"):
        return token
    return f"+{token}"


def pick_points(points_b: str, points_c: str) -> str:
    """The later points candidate wins when present; the source sometimes repeats it."""
    return points_c if points_c else points_b


def _parse_rank(value: str, line: str) -> int:
    rank = _parse_count("rank", value, line)
    if rank == 0:
        raise FieldParseError(
            f"rank must be positive: {value!r}",
            field="rank",
            value=value,
            line=line,
        )
    return rank


def _parse_count(field: str, value: str, line: str) -> int:
    # int() would also take "+3", " 3" and non-ASCII digits
    if not (value.isascii() and value.isdigit()):
        raise FieldParseError(
            f"{field} is not a non-negative integer: {value!r}",
            field=field,
            value=value,
            line=line,
        )
    return int(value)
