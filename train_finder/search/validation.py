from __future__ import annotations

import re

from ..errors import ErrorKind, TrainSearchError
from ..models.train import Criterion

_STATION_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_STATION_ID = 2**63 - 1


def check_station(station: str) -> int:
    """Return the positive station id encoded in ``station``.

    Raises TrainSearchError with EMPTY_STATION for an empty string and
    BAD_STATION_INPUT for anything that is not an integer between 1 and
    MAX_STATION_ID. Surrounding whitespace is not stripped.
    """

    if station == "":
        raise TrainSearchError(ErrorKind.EMPTY_STATION)
    if not _STATION_PATTERN.fullmatch(station):
        raise TrainSearchError(ErrorKind.BAD_STATION_INPUT)
    station_id = int(station)
    if station_id < 1 or station_id > MAX_STATION_ID:
        raise TrainSearchError(ErrorKind.BAD_STATION_INPUT)
    return station_id


def check_criteria(criteria: str) -> Criterion:
    try:
        return Criterion(criteria)
    except ValueError:
        raise TrainSearchError(ErrorKind.UNSUPPORTED_CRITERIA) from None
