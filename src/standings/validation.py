"""Validation layer between the parser and output.

Validates StandingsRecord values against the pydantic StandingsModel,
logs soft-validation warnings, drops records that fail hard checks, and
provides table-level integrity checks (rank sequence).

Usage::

    from standings.validation import validate_batch, check_rank_sequence

    valid, rejected = validate_batch(records)
    for problem in check_rank_sequence(valid):
        logger.warning(problem)
"""

import logging
import warnings
from collections import Counter

from pydantic import ValidationError

from standings.models import StandingsModel
from standings.normalizer import StandingsRecord

logger = logging.getLogger(__name__)


def validate_record(record: StandingsRecord) -> dict | None:
    """Validate one record, logging warnings and failures.

    Returns:
        The validated dict (via ``model.model_dump()``) on success, or
        ``None`` if validation failed.
    """
    data = record.to_dict()

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            model = StandingsModel.model_validate(data)

        for w in caught:
            logger.warning("Validation warning for rank %s: %s", record.rank, w.message)

        return model.model_dump()

    except ValidationError as e:
        logger.error(
            "Validation failed for rank %s (%s): %s",
            record.rank,
            record.team,
            e,
        )
        return None


def validate_batch(records: list[StandingsRecord]) -> tuple[list[dict], int]:
    """Validate a list of records, returning valid dicts and the rejected count."""
    valid: list[dict] = []
    rejected = 0

    for record in records:
        result = validate_record(record)
        if result is not None:
            valid.append(result)
        else:
            rejected += 1

    return valid, rejected


def check_rank_sequence(rows: list[StandingsRecord] | list[dict]) -> list[str]:
    """Check that ranks are unique and ascending.

    Duplicate ranks are reported, never removed: a duplicate usually means
    the page showed the same table twice (e.g. a mobile and desktop copy).

    Args:
        rows: StandingsRecord values or validated dicts, in output order.

    Returns:
        List of warning strings (empty = clean).
    """
    ranks = [r["rank"] if isinstance(r, dict) else r.rank for r in rows]
    problems: list[str] = []

    for rank, count in sorted(Counter(ranks).items()):
        if count > 1:
            problems.append(f"Rank {rank} appears {count} times")

    for prev, cur in zip(ranks, ranks[1:]):
        if cur < prev:
            problems.append(f"Rank {cur} follows rank {prev} (not ascending)")

    return problems
