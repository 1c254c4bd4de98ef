from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every failure a train search can report."""

    EMPTY_STATION = "empty_station"
    BAD_STATION_INPUT = "bad_station_input"
    EMPTY_DEPARTURE_STATION = "empty_departure_station"
    EMPTY_ARRIVAL_STATION = "empty_arrival_station"
    BAD_DEPARTURE_STATION_INPUT = "bad_departure_station_input"
    BAD_ARRIVAL_STATION_INPUT = "bad_arrival_station_input"
    UNSUPPORTED_CRITERIA = "unsupported_criteria"
    DATA_LOAD = "data_load"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_STATION: "empty station",
    ErrorKind.BAD_STATION_INPUT: "bad station input",
    ErrorKind.EMPTY_DEPARTURE_STATION: "empty departure station",
    ErrorKind.EMPTY_ARRIVAL_STATION: "empty arrival station",
    ErrorKind.BAD_DEPARTURE_STATION_INPUT: "bad departure station input",
    ErrorKind.BAD_ARRIVAL_STATION_INPUT: "bad arrival station input",
    ErrorKind.UNSUPPORTED_CRITERIA: "unsupported criteria",
    ErrorKind.DATA_LOAD: "unable to load train data",
}


class TrainSearchError(Exception):
    """Raised when a train search cannot be answered.

    Compare failures through ``kind``; the message is for humans only.
    """

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.message


class DataLoadError(TrainSearchError):
    """The train dataset could not be read or decoded."""

    def __init__(self, detail: str) -> None:
        super().__init__(ErrorKind.DATA_LOAD)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind.message}: {self.detail}"
