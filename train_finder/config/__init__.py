"""Configuration helpers."""

from .settings import RESULT_LIMIT, TIME_FORMAT, ZERO_TIME, Settings, load_settings

__all__ = [
    "RESULT_LIMIT",
    "TIME_FORMAT",
    "ZERO_TIME",
    "Settings",
    "load_settings",
]
