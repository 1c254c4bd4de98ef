"""Train search: input validation, selection, ranking."""

from .finder import find_trains
from .selection import limit_trains, rank_trains, select_trains, sort_trains
from .validation import check_criteria, check_station

__all__ = [
    "check_criteria",
    "check_station",
    "find_trains",
    "limit_trains",
    "rank_trains",
    "select_trains",
    "sort_trains",
]
