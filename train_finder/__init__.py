"""Find the best trains between two stations."""

from .errors import DataLoadError, ErrorKind, TrainSearchError
from .models import Criterion, Train
from .search import find_trains

__all__ = [
    "Criterion",
    "DataLoadError",
    "ErrorKind",
    "Train",
    "TrainSearchError",
    "find_trains",
]
