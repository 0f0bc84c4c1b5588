"""Background collection and history for the resource sampler."""

from __future__ import annotations

from .collector import DataCollector
from .history import SystemHistory, SystemHistoryDataPoint

__all__ = [
    "DataCollector",
    "SystemHistory",
    "SystemHistoryDataPoint",
]
