"""Dataclass representing one sampled view of system health."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ResourceSnapshot:
    cpu_usage: tuple[float, ...]
    memory_total: int
    memory_used: int
    memory_free: int
    memory_cached: int
    uptime: int
    load_avg: tuple[float, float, float]
    network_rx_bytes: int
    network_tx_bytes: int
    disk_io_read_bytes: int
    disk_io_write_bytes: int
    disk_total_bytes: int
    disk_used_bytes: int
    disk_free_bytes: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly copy (sequences become lists)."""

        data = asdict(self)
        data["cpu_usage"] = list(self.cpu_usage)
        data["load_avg"] = list(self.load_avg)
        return data
