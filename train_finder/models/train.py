from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import Enum

from ..config.settings import TIME_FORMAT, TRAIN_LINE_FORMAT, ZERO_TIME


class Criterion(str, Enum):
    """Field used to order matching trains."""

    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"


@dataclass(slots=True, frozen=True)
class Train:
    """A single train from the timetable snapshot."""

    train_id: int = 0
    departure_station_id: int = 0
    arrival_station_id: int = 0
    price: float = 0.0
    arrival_time: time = ZERO_TIME
    departure_time: time = ZERO_TIME

    def sort_value(self, criterion: Criterion) -> float | time:
        if criterion is Criterion.PRICE:
            return self.price
        if criterion is Criterion.ARRIVAL_TIME:
            return self.arrival_time
        return self.departure_time

    def summary_line(self) -> str:
        return TRAIN_LINE_FORMAT.format(
            train_id=self.train_id,
            departure_station_id=self.departure_station_id,
            arrival_station_id=self.arrival_station_id,
            price=_format_price(self.price),
            arrival_time=self.arrival_time.strftime(TIME_FORMAT),
            departure_time=self.departure_time.strftime(TIME_FORMAT),
        )

    def __str__(self) -> str:
        return self.summary_line()


def _format_price(price: float) -> str:
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))
