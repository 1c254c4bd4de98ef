from __future__ import annotations

import logging
from typing import Any, Callable, List, Sequence

from ..config.settings import load_settings
from ..errors import ErrorKind, TrainSearchError
from ..loader.records import parse_record
from ..loader.source import load_all_records
from ..models.train import Train
from .selection import rank_trains, select_trains
from .validation import check_criteria, check_station

LOGGER = logging.getLogger(__name__)

RecordLoader = Callable[[], Sequence[Any]]

_DEPARTURE_ERRORS = {
    ErrorKind.EMPTY_STATION: ErrorKind.EMPTY_DEPARTURE_STATION,
    ErrorKind.BAD_STATION_INPUT: ErrorKind.BAD_DEPARTURE_STATION_INPUT,
}
_ARRIVAL_ERRORS = {
    ErrorKind.EMPTY_STATION: ErrorKind.EMPTY_ARRIVAL_STATION,
    ErrorKind.BAD_STATION_INPUT: ErrorKind.BAD_ARRIVAL_STATION_INPUT,
}


def _check_station_as(station: str, kinds: dict[ErrorKind, ErrorKind]) -> int:
    try:
        return check_station(station)
    except TrainSearchError as exc:
        raise TrainSearchError(kinds[exc.kind]) from exc


def _default_loader() -> Sequence[Any]:
    return load_all_records(load_settings().data_file)


def find_trains(
    departure_station: str,
    arrival_station: str,
    criteria: str,
    *,
    load_records: RecordLoader | None = None,
) -> List[Train]:
    """Return up to three trains between two stations, best first.

    Inputs are checked in order (departure, arrival, criteria) and the
    first failure is raised as TrainSearchError. Records are only loaded
    once every input is valid. An empty list means no train matched.
    """

    try:
        departure = _check_station_as(departure_station, _DEPARTURE_ERRORS)
        arrival = _check_station_as(arrival_station, _ARRIVAL_ERRORS)
        criterion = check_criteria(criteria)
    except TrainSearchError as exc:
        LOGGER.info("Rejected search input: %s", exc)
        raise

    loader = load_records or _default_loader
    trains = [parse_record(item) for item in loader()]
    return rank_trains(select_trains(trains, departure, arrival), criterion)
