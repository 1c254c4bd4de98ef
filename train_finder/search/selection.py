from __future__ import annotations

import logging
from typing import List, Sequence

from ..config.settings import RESULT_LIMIT
from ..models.train import Criterion, Train

LOGGER = logging.getLogger(__name__)


def select_trains(trains: Sequence[Train], departure: int, arrival: int) -> List[Train]:
    """Keep trains running exactly from ``departure`` to ``arrival``, in dataset order."""

    selected: List[Train] = []
    for train in trains:
        if train.departure_station_id != departure:
            continue
        if train.arrival_station_id != arrival:
            continue
        selected.append(train)
    LOGGER.debug("Selected %d of %d trains for %s -> %s", len(selected), len(trains), departure, arrival)
    return selected


def sort_trains(trains: Sequence[Train], criterion: Criterion) -> List[Train]:
    """Order by the criterion value, then by ascending train id."""

    if len(trains) < 2:
        return list(trains)
    return sorted(trains, key=lambda train: (train.sort_value(criterion), train.train_id))


def limit_trains(trains: Sequence[Train], limit: int = RESULT_LIMIT) -> List[Train]:
    return list(trains[:limit])


def rank_trains(trains: Sequence[Train], criterion: Criterion, limit: int = RESULT_LIMIT) -> List[Train]:
    ranked = limit_trains(sort_trains(trains, criterion), limit)
    LOGGER.debug("Ranked %d trains by %s, keeping %d", len(trains), criterion.value, len(ranked))
    return ranked
