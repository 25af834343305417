"""Pydantic v2 validation model for standings records."""

import re
import warnings

from pydantic import BaseModel, Field, field_validator, model_validator
from typing_extensions import Self

_GOALS_RE = re.compile(r"^\d+:\d+$")
_DIFF_RE = re.compile(r"^[+-]\d+$")


class StandingsModel(BaseModel):
    """Validation model for one league-table row.

    Shape rules (rank > 0, counts >= 0, goals/diff format) reject the
    record. Arithmetic cross-checks only warn: the parser never recomputes
    fields, so a mismatch points at the source page, not at the row.
    """

    rank: int = Field(gt=0)
    team: str = Field(min_length=1)
    played: int = Field(ge=0)
    wins: int = Field(ge=0)
    draws: int = Field(ge=0)
    losses: int = Field(ge=0)
    goals: str
    diff: str
    points: str = Field(min_length=1)

    @field_validator("team")
    @classmethod
    def validate_team(cls, v: str) -> str:
        """Team name must contain something besides whitespace."""
        if not v.strip():
            raise ValueError("team must not be blank")
        return v

    @field_validator("goals")
    @classmethod
    def validate_goals(cls, v: str) -> str:
        """Goals must be '<for>:<against>'."""
        if not _GOALS_RE.match(v):
            raise ValueError(f"goals must look like '366:297', got '{v}'")
        return v

    @field_validator("diff")
    @classmethod
    def validate_diff(cls, v: str) -> str:
        """Diff must carry an explicit sign."""
        if not _DIFF_RE.match(v):
            raise ValueError(f"diff must look like '+69' or '-5', got '{v}'")
        return v

    @property
    def goals_for(self) -> int:
        return int(self.goals.split(":")[0])

    @property
    def goals_against(self) -> int:
        return int(self.goals.split(":")[1])

    @model_validator(mode="after")
    def warn_results_mismatch(self) -> Self:
        """wins + draws + losses should equal played."""
        total = self.wins + self.draws + self.losses
        if total != self.played:
            warnings.warn(
                f"{self.team} (rank {self.rank}): wins ({self.wins}) + draws "
                f"({self.draws}) + losses ({self.losses}) = {total} != "
                f"played ({self.played})",
                stacklevel=2,
            )
        return self

    @model_validator(mode="after")
    def warn_diff_mismatch(self) -> Self:
        """diff should equal goals_for - goals_against."""
        expected = self.goals_for - self.goals_against
        if int(self.diff) != expected:
            warnings.warn(
                f"{self.team} (rank {self.rank}): diff {self.diff} != "
                f"{self.goals_for} - {self.goals_against} = {expected:+d}",
                stacklevel=2,
            )
        return self
