"""Rolling history of derived data points."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import asdict, dataclass
from statistics import mean
from typing import Any, Deque

from resource_sampler.core import HISTORY
from resource_sampler.models import ResourceSnapshot


@dataclass(frozen=True, slots=True)
class SystemHistoryDataPoint:
    timestamp: float
    cpu_average: float
    memory_used: int
    network_rx_bytes: int
    network_tx_bytes: int
    disk_io_read_bytes: int
    disk_io_write_bytes: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class SystemHistory:
    """Bounded list of data points, oldest first."""

    def __init__(self, maxlen: int = HISTORY.short_window) -> None:
        self._points: Deque[SystemHistoryDataPoint] = deque(maxlen=maxlen)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def maxlen(self) -> int | None:
        return self._points.maxlen

    def add_data_point(
        self, snapshot: ResourceSnapshot, timestamp: float | None = None
    ) -> SystemHistoryDataPoint:
        point = SystemHistoryDataPoint(
            timestamp=time.time() if timestamp is None else timestamp,
            cpu_average=mean(snapshot.cpu_usage) if snapshot.cpu_usage else 0.0,
            memory_used=snapshot.memory_used,
            network_rx_bytes=snapshot.network_rx_bytes,
            network_tx_bytes=snapshot.network_tx_bytes,
            disk_io_read_bytes=snapshot.disk_io_read_bytes,
            disk_io_write_bytes=snapshot.disk_io_write_bytes,
        )
        self._points.append(point)
        return point

    def data_points(self) -> list[SystemHistoryDataPoint]:
        return list(self._points)

    def latest(self) -> SystemHistoryDataPoint | None:
        return self._points[-1] if self._points else None

    def clear(self) -> None:
        self._points.clear()
