from __future__ import annotations

from dataclasses import dataclass
from datetime import time
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

TIME_FORMAT = "%H:%M:%S"
ZERO_TIME = time(0, 0, 0)
RESULT_LIMIT = 3

DEFAULT_DATA_FILE = "data.json"
DEFAULT_LOG_LEVEL = "WARNING"

TRAIN_LINE_FORMAT = (
    "TrainID: {train_id}, DepartureStationID: {departure_station_id}, "
    "ArrivalStationID: {arrival_station_id}, Price: {price}, "
    "ArrivalTime: {arrival_time}, DepartureTime: {departure_time}"
)

# JSON keys of a raw train record
FIELD_TRAIN_ID = "trainId"
FIELD_DEPARTURE_STATION_ID = "departureStationId"
FIELD_ARRIVAL_STATION_ID = "arrivalStationId"
FIELD_PRICE = "price"
FIELD_ARRIVAL_TIME = "arrivalTime"
FIELD_DEPARTURE_TIME = "departureTime"


def _resolve_path(path_str: str | Path | None, default: str) -> Path:
    if not path_str:
        path_str = default
    return Path(path_str).expanduser()


@dataclass(slots=True, frozen=True)
class Settings:
    """Aggregated runtime configuration."""

    data_file: Path
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(data_file: str | Path | None = None) -> Settings:
    """Load configuration from environment variables (and ``.env``)."""

    resolved_data_file = _resolve_path(data_file or os.getenv("TRAINS_DATA_FILE"), DEFAULT_DATA_FILE)
    log_level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()

    return Settings(
        data_file=resolved_data_file,
        log_level=log_level,
    )
