"""Unit tests for station and criteria validation."""

import pytest

from train_finder.errors import ErrorKind, TrainSearchError
from train_finder.models import Criterion
from train_finder.search import check_criteria, check_station


class TestCheckStation:
    """Tests for check_station."""

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("1902", 1902), ("+7", 7), ("007", 7)])
    def test_valid_station(self, raw, expected):
        """Positive integers are accepted."""
        assert check_station(raw) == expected

    def test_largest_station(self):
        """The largest 64-bit id is still accepted."""
        assert check_station("9223372036854775807") == 2**63 - 1

    def test_empty_station(self):
        """An empty string is reported as an empty station."""
        with pytest.raises(TrainSearchError) as exc_info:
            check_station("")
        assert exc_info.value.kind is ErrorKind.EMPTY_STATION

    @pytest.mark.parametrize("raw", ["0", "-3", "w", "19[[", " ", " 12", "12 ", "1.5", "١٢", "9223372036854775808", "99999999999999999999"])
    def test_bad_station(self, raw):
        """Non-numeric, padded or non-positive input is bad input."""
        with pytest.raises(TrainSearchError) as exc_info:
            check_station(raw)
        assert exc_info.value.kind is ErrorKind.BAD_STATION_INPUT


class TestCheckCriteria:
    """Tests for check_criteria."""

    @pytest.mark.parametrize("raw", ["price", "arrival-time", "departure-time"])
    def test_supported(self, raw):
        """Supported criteria map to the enum."""
        assert check_criteria(raw) is Criterion(raw)

    @pytest.mark.parametrize("raw", ["", "duck", "Price", "departure", " price"])
    def test_unsupported(self, raw):
        """Everything else is unsupported."""
        with pytest.raises(TrainSearchError) as exc_info:
            check_criteria(raw)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_CRITERIA
        assert str(exc_info.value) == "unsupported criteria"
