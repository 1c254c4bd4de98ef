from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from ..errors import DataLoadError
from ..models.train import Train
from .records import parse_record

LOGGER = logging.getLogger(__name__)


def load_all_records(path: str | Path) -> List[Any]:
    """Read the raw train records from a JSON file."""

    data_path = Path(path)
    try:
        with data_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        LOGGER.error("Cannot read train data from %s: %s", data_path, exc)
        raise DataLoadError(f"{data_path}: {exc.strerror or exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        LOGGER.error("Train data in %s is not valid JSON: %s", data_path, exc)
        raise DataLoadError(f"{data_path}: invalid JSON ({exc})") from exc

    if not isinstance(payload, list):
        LOGGER.error("Train data in %s is not a list", data_path)
        raise DataLoadError(f"{data_path}: train data must be a list of train objects")

    LOGGER.info("Loaded %d train records from %s", len(payload), data_path)
    return payload


def load_trains(path: str | Path) -> List[Train]:
    return [parse_record(item) for item in load_all_records(path)]
