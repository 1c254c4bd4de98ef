"""Dataset loading and record parsing."""

from .records import RECORD_SCHEMA, parse_record, parse_record_with_warnings
from .source import load_all_records, load_trains

__all__ = [
    "RECORD_SCHEMA",
    "load_all_records",
    "load_trains",
    "parse_record",
    "parse_record_with_warnings",
]
