"""Data models."""

from .train import Criterion, Train

__all__ = ["Criterion", "Train"]
