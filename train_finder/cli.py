from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import load_settings
from .errors import DataLoadError, TrainSearchError
from .loader import load_all_records
from .search import find_trains

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="train_finder command-line interface")
    parser.add_argument("--data-file", type=Path, default=None, help="JSON file with the train records")
    parser.add_argument("--log-level", default=None, help="Logging level (WARNING, INFO, DEBUG, ...)")
    return parser


def read_user_input(prompt: str) -> str:
    print(prompt)
    try:
        return input()
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(data_file=args.data_file)
    log_level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    departure_station = read_user_input("Enter departure station ID")
    arrival_station = read_user_input("Enter arrival station ID")
    criteria = read_user_input("Enter criteria")

    try:
        trains = find_trains(
            departure_station,
            arrival_station,
            criteria,
            load_records=lambda: load_all_records(settings.data_file),
        )
    except DataLoadError as exc:
        print(f"could not read train data: {exc}")
        return 1
    except TrainSearchError as exc:
        print(f"entered incorrect parameters: {exc}")
        return 1

    LOGGER.info("Found %d trains", len(trains))
    for train in trains:
        print(train.summary_line())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
