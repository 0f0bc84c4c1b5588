"""Core utilities for the resource sampler."""

from __future__ import annotations

from .config import CONFIG, HISTORY, CollectorConfig, HistoryConfig

__all__ = [
    "CONFIG",
    "HISTORY",
    "CollectorConfig",
    "HistoryConfig",
]
