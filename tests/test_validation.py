"""Unit tests for the validation layer (standings.validation).

Tests validate_record, validate_batch, and check_rank_sequence.
"""

import logging

from standings.normalizer import StandingsRecord
from standings.parser import parse_standings
from standings.validation import check_rank_sequence, validate_batch, validate_record


def make_record(**overrides) -> StandingsRecord:
    fields = {
        "rank": 1,
        "team": "SG Flensburg-Handewitt",
        "played": 10,
        "wins": 8,
        "draws": 2,
        "losses": 0,
        "goals": "366:297",
        "diff": "+69",
        "points": "18:2",
    }
    fields.update(overrides)
    return StandingsRecord(**fields)


# ===================================================================
# validate_record tests
# ===================================================================


class TestValidateRecord:
    def test_valid_returns_dict(self):
        result = validate_record(make_record())
        assert result == make_record().to_dict()

    def test_invalid_returns_none(self, caplog):
        with caplog.at_level(logging.ERROR, logger="standings.validation"):
            result = validate_record(make_record(goals="3"))
        assert result is None
        assert "Validation failed for rank 1" in caplog.text

    def test_soft_warning_logged_and_kept(self, caplog):
        with caplog.at_level(logging.WARNING, logger="standings.validation"):
            result = validate_record(make_record(played=11))
        assert result is not None
        assert result["played"] == 11
        assert "Validation warning for rank 1" in caplog.text

    def test_parsed_rows_validate(self):
        records = parse_standings(
            [
                "1 SG Flensburg-Handewitt 10 8 2 0 366:297 69 18:2",
                "4 Füchse Berlin 10 7 1 2 300:305 -5 15:5",
            ]
        )
        assert [validate_record(r)["diff"] for r in records] == ["+69", "-5"]

    def test_shifted_goals_rejected(self):
        # goals/diff swapped into the wrong slots
        assert validate_record(make_record(goals="0", diff="+366:297")) is None


# ===================================================================
# validate_batch tests
# ===================================================================


class TestValidateBatch:
    def test_all_valid(self):
        records = [make_record(), make_record(rank=2, team="SC Magdeburg")]
        valid, rejected = validate_batch(records)
        assert len(valid) == 2
        assert rejected == 0

    def test_mixed(self):
        records = [make_record(), make_record(rank=2, diff="52")]
        valid, rejected = validate_batch(records)
        assert [v["rank"] for v in valid] == [1]
        assert rejected == 1

    def test_empty(self):
        assert validate_batch([]) == ([], 0)


# ===================================================================
# check_rank_sequence tests
# ===================================================================


class TestCheckRankSequence:
    def test_clean(self):
        records = [make_record(rank=1), make_record(rank=2), make_record(rank=3)]
        assert check_rank_sequence(records) == []

    def test_gaps_are_fine(self):
        assert check_rank_sequence([make_record(rank=1), make_record(rank=4)]) == []

    def test_duplicate(self):
        records = [make_record(rank=1), make_record(rank=1)]
        assert check_rank_sequence(records) == ["Rank 1 appears 2 times"]

    def test_descending(self):
        records = [make_record(rank=2), make_record(rank=1)]
        assert check_rank_sequence(records) == ["Rank 1 follows rank 2 (not ascending)"]

    def test_accepts_dicts(self):
        rows = [make_record(rank=1).to_dict(), make_record(rank=1).to_dict()]
        assert check_rank_sequence(rows) == ["Rank 1 appears 2 times"]

    def test_empty(self):
        assert check_rank_sequence([]) == []
