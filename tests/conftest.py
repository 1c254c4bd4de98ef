"""Shared pytest fixtures for train_finder tests."""

import json

import pytest


def _record(train_id, departure, arrival, price, arrival_time, departure_time):
    return {
        "trainId": train_id,
        "departureStationId": departure,
        "arrivalStationId": arrival,
        "price": price,
        "arrivalTime": arrival_time,
        "departureTime": departure_time,
    }


RAW_RECORDS = [
    _record(1141, 1902, 1929, 176.77, "12:15:00", "16:48:00"),
    _record(978, 1902, 1929, 258.53, "04:15:00", "13:10:00"),
    _record(1178, 1902, 1929, 164.65, "10:25:00", "16:36:00"),
    _record(2201, 1902, 1929, 280, "06:15:00", "14:55:00"),
    _record(1316, 1902, 1929, 209.73, "05:55:00", "13:52:00"),
    _record(1177, 1902, 1929, 164.65, "10:25:00", "16:36:00"),
    _record(1386, 1902, 1929, 220.49, "08:30:00", "13:03:00"),
    _record(1001, 1902, 1930, 99.5, "01:00:00", "00:10:00"),
    _record(1002, 1929, 1902, 10.0, "02:00:00", "01:10:00"),
    _record(1003, 1929, 1930, 55.25, "03:00:00", "02:10:00"),
    _record(1004, 1929, 1930, 55.25, "03:30:00", "02:40:00"),
]


@pytest.fixture
def raw_records():
    return [dict(record) for record in RAW_RECORDS]


@pytest.fixture
def load_records(raw_records):
    return lambda: raw_records


@pytest.fixture
def data_file(tmp_path, raw_records):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_records), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TRAINS_DATA_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
