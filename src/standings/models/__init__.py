"""Pydantic v2 validation models.

Re-exports all model classes for convenient import::

    from standings.models import StandingsModel
"""

from .standings import StandingsModel

__all__ = [
    "StandingsModel",
]
