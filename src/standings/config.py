"""Parser configuration with defaults for the Handball-Bundesliga table."""

from dataclasses import dataclass, field
from pathlib import Path

from standings.exceptions import AllowListError

# Team-name prefixes that qualify a line as a table row. Matched
# case-insensitively right after the rank. A trailing "*" matches one or more
# characters (covers "Minden" / "Mindener" variants).
DEFAULT_TEAM_PREFIXES: tuple[str, ...] = (
    "SG Flensburg",
    "SC Magdeburg",
    "THW Kiel",
    "Füchse Berlin",
    "Gummersbach",
    "Rhein-Neckar",
    "Melsungen",
    "Lemgo",
    "Frisch Auf",
    "Hamburg",
    "Bergischer",
    "Hannover",
    "Erlangen",
    "Stuttgart",
    "Balingen",
    "Mind*",
)

# Headline keywords for the news filter (case-insensitive substring match).
DEFAULT_NEWS_KEYWORDS: tuple[str, ...] = (
    "HBL",
    "Füchse",
    "Magdeburg",
    "Kiel",
    "Gummersbach",
    "Rhein-Neckar",
    "Lemgo",
    "Berlin",
    "THW",
    "Verletzung",
    "Trainer",
    "Topspiel",
    "Wechsel",
)


@dataclass
class StandingsConfig:
    """Configuration for a standings run.

    Nothing here is mutated after construction; the CLI builds a fresh
    instance per invocation from its overrides.
    """

    # Allow-list of team-name prefixes handed to the LineSelector
    team_prefixes: tuple[str, ...] = DEFAULT_TEAM_PREFIXES

    # Statistic block layout: "typed" (right-anchored scan) or "positional" (last 8 tokens)
    layout: str = "typed"

    # News filter
    news_keywords: tuple[str, ...] = DEFAULT_NEWS_KEYWORDS
    news_limit: int = 5

    # Logs go to {data_dir}/logs/
    data_dir: str = "data"

    # Run pydantic validation over parsed records before output
    validate: bool = False

    # Prefixes added on top of team_prefixes (CLI --team)
    extra_prefixes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def allow_list(self) -> tuple[str, ...]:
        """Effective allow-list: configured prefixes plus any extras, de-duplicated."""
        seen: dict[str, None] = {}
        for prefix in (*self.team_prefixes, *self.extra_prefixes):
            seen.setdefault(prefix, None)
        return tuple(seen)


def load_allow_list(path: str | Path) -> tuple[str, ...]:
    """Read team-name prefixes from a text file, one per line.

    Blank lines and lines starting with ``#`` are ignored. Surrounding
    whitespace is stripped.

    Raises:
        AllowListError: If the file cannot be read or contains no prefixes.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise AllowListError(f"Cannot read allow-list {p}: {e}", path=str(p)) from e

    prefixes = tuple(
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.strip().startswith("#")
    )
    if not prefixes:
        raise AllowListError(f"Allow-list {p} has no entries", path=str(p))
    return prefixes
