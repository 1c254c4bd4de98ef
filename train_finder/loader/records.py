from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, Callable, List, Tuple

from ..config.settings import (
    FIELD_ARRIVAL_STATION_ID,
    FIELD_ARRIVAL_TIME,
    FIELD_DEPARTURE_STATION_ID,
    FIELD_DEPARTURE_TIME,
    FIELD_PRICE,
    FIELD_TRAIN_ID,
    TIME_FORMAT,
    ZERO_TIME,
)
from ..models.train import Train

LOGGER = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"[0-9]{1,2}:[0-9]{2}:[0-9]{2}")


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    # NaN and Infinity are valid JSON for the json module
    return math.isfinite(value)


def _read_int(value: Any) -> int | None:
    if not _is_number(value):
        return None
    return int(value)


def _read_float(value: Any) -> float | None:
    if not _is_number(value):
        return None
    return float(value)


def _read_time(value: Any) -> time | None:
    if not isinstance(value, str) or not _TIME_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        return None


@dataclass(slots=True, frozen=True)
class FieldSpec:
    """Maps one raw key onto a Train attribute."""

    key: str
    attribute: str
    reader: Callable[[Any], Any]
    default: Any


RECORD_SCHEMA: Tuple[FieldSpec, ...] = (
    FieldSpec(FIELD_TRAIN_ID, "train_id", _read_int, 0),
    FieldSpec(FIELD_DEPARTURE_STATION_ID, "departure_station_id", _read_int, 0),
    FieldSpec(FIELD_ARRIVAL_STATION_ID, "arrival_station_id", _read_int, 0),
    FieldSpec(FIELD_PRICE, "price", _read_float, 0.0),
    FieldSpec(FIELD_ARRIVAL_TIME, "arrival_time", _read_time, ZERO_TIME),
    FieldSpec(FIELD_DEPARTURE_TIME, "departure_time", _read_time, ZERO_TIME),
)


def parse_record_with_warnings(raw: Any) -> Tuple[Train, List[str]]:
    """Build a Train from a loosely-typed record.

    Returns the train together with the keys that were missing or
    malformed and therefore fell back to their zero value.
    """

    payload: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    values: dict[str, Any] = {}
    defaulted: List[str] = []
    for spec in RECORD_SCHEMA:
        value = spec.reader(payload.get(spec.key))
        if value is None:
            value = spec.default
            defaulted.append(spec.key)
        values[spec.attribute] = value
    return Train(**values), defaulted


def parse_record(raw: Any) -> Train:
    """Build a Train from a raw record, never failing."""

    train, defaulted = parse_record_with_warnings(raw)
    if defaulted:
        LOGGER.debug("Train %s: defaulted fields %s", train.train_id, ", ".join(defaulted))
    return train
