"""Field splitting: partition a candidate line into rank, team name and statistic block.

Provides:
- split_line: tokenize one selected line under a block layout
- SplitLine: rank token, joined team name, 8-slot statistic block

Two layouts locate the statistic block:

``positional``
    The last 8 tokens, always. Block slots are
    ``[played, wins, draws, losses, goals, diff_or_points_a,
    points_b_or_duplicate, points_c]``. A team name containing an all-digit
    token, or a row with a 7-token block, shifts the block; such rows are
    rejected when slots 4-5 do not hold a goals pair and a diff.

``typed`` (default)
    Scan from the right for the typed tail ``PAIR SIGNED PAIR [PAIR]``
    (goals, diff, points, optional repeated points). The four tokens before
    the goals pair are the count fields. 7-token rows get an empty
    ``points_c`` slot so the block is always 8 wide.
"""

import re
from dataclasses import dataclass

from standings.exceptions import StatBlockNotFound

LAYOUT_TYPED = "typed"
LAYOUT_POSITIONAL = "positional"
LAYOUTS = (LAYOUT_TYPED, LAYOUT_POSITIONAL)

BLOCK_WIDTH = 8
COUNT_FIELDS = 4

_PAIR_RE = re.compile(r"^\d+:\d+$")
_SIGNED_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class SplitLine:
    """One candidate line split into its three parts. Nothing is parsed yet."""

    rank: str
    team: str
    block: tuple[str, ...]  # always BLOCK_WIDTH entries, "" for a missing slot
    line: str


def split_line(line: str, layout: str = LAYOUT_TYPED) -> SplitLine:
    """Split a selected line into rank, team name and statistic block.

    Args:
        line: A trimmed candidate line from the LineSelector.
        layout: ``"typed"`` or ``"positional"``.

    Returns:
        SplitLine with the raw (unparsed) tokens.

    Raises:
        ValueError: If ``layout`` is unknown.
        StatBlockNotFound: If the line has no locatable statistic block
            or no team-name tokens are left over.
    """
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown block layout {layout!r}, expected one of {LAYOUTS}")

    tokens = line.split()
    if layout == LAYOUT_POSITIONAL:
        return _split_positional(line, tokens)
    return _split_typed(line, tokens)


def _split_positional(line: str, tokens: list[str]) -> SplitLine:
    # rank + at least one team token + block
    if len(tokens) < BLOCK_WIDTH + 2:
        raise StatBlockNotFound(
            f"Expected at least {BLOCK_WIDTH + 2} tokens, got {len(tokens)}",
            line=line,
        )
    block = tuple(tokens[-BLOCK_WIDTH:])
    # a shifted block puts a count where goals belong
    if not (_PAIR_RE.match(block[4]) and _SIGNED_RE.match(block[5])):
        raise StatBlockNotFound(
            f"No goals pair and diff at block slots 4-5, got {block[4]!r} {block[5]!r}",
            line=line,
        )
    return SplitLine(
        rank=tokens[0],
        team=" ".join(tokens[1:-BLOCK_WIDTH]),
        block=block,
        line=line,
    )


def _split_typed(line: str, tokens: list[str]) -> SplitLine:
    tail_width = _find_typed_tail(tokens)
    if tail_width is None:
        raise StatBlockNotFound(
            "No goals/diff/points tail found at end of line", line=line
        )

    goals_idx = len(tokens) - tail_width
    counts_idx = goals_idx - COUNT_FIELDS
    if counts_idx < 2:
        raise StatBlockNotFound(
            f"Too few tokens before goals pair ({goals_idx}) for rank, "
            f"team and {COUNT_FIELDS} count fields",
            line=line,
        )

    block = tokens[counts_idx:]
    block += [""] * (BLOCK_WIDTH - len(block))

    return SplitLine(
        rank=tokens[0],
        team=" ".join(tokens[1:counts_idx]),
        block=tuple(block),
        line=line,
    )


def _find_typed_tail(tokens: list[str]) -> int | None:
    """Width of the typed tail at the end of ``tokens``, or None.

    Tries the 4-token form (duplicated points) before the 3-token form.
    """
    for width in (4, 3):
        if len(tokens) < width:
            continue
        goals, diff, *points = tokens[-width:]
        if (
            _PAIR_RE.match(goals)
            and _SIGNED_RE.match(diff)
            and all(_PAIR_RE.match(p) for p in points)
        ):
            return width
    return None
