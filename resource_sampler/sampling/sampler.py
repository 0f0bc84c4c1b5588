"""Stateful sampler turning provider readings into resource snapshots."""

from __future__ import annotations

import time
from typing import Callable, Iterable

from resource_sampler.models import CumulativeCounter, ProviderReadings, ResourceSnapshot

from .disk_capacity import DiskFilterPolicy, aggregate_disk_capacity, select_disk_filter
from .disk_io import aggregate_disk_io
from .network import NetworkBaseline, NetworkRateTracker


class ResourceSampler:
    """Produce one :class:`ResourceSnapshot` per :meth:`collect` call.

    The only state kept between calls is the network baseline. The sampler
    does no locking: an instance must be driven by a single caller (for
    example one polling loop, or callers sharing a mutex).
    """

    def __init__(
        self,
        networks: Iterable[CumulativeCounter],
        *,
        clock: Callable[[], float] = time.monotonic,
        disk_filter: DiskFilterPolicy | None = None,
    ) -> None:
        self._network = NetworkRateTracker(networks, clock=clock)
        self._disk_filter = disk_filter if disk_filter is not None else select_disk_filter()

    @property
    def baseline(self) -> NetworkBaseline:
        return self._network.baseline

    @property
    def disk_filter(self) -> DiskFilterPolicy:
        return self._disk_filter

    def collect(self, readings: ProviderReadings) -> ResourceSnapshot:
        network_rx, network_tx = self._network.compute_rate(readings.networks)
        disk_io_read, disk_io_write = aggregate_disk_io(readings.processes)
        disk_total, disk_used, disk_free = aggregate_disk_capacity(
            self._disk_filter.filter(readings.disks)
        )

        memory_total = readings.memory_total
        memory_used = readings.memory_used
        # Only a real provider figure is reported; otherwise cached is 0.
        memory_cached = readings.memory_cached or 0

        return ResourceSnapshot(
            cpu_usage=tuple(float(usage) for usage in readings.cpu_usage),
            memory_total=memory_total,
            memory_used=memory_used,
            memory_free=max(0, memory_total - memory_used),
            memory_cached=memory_cached,
            uptime=readings.uptime,
            load_avg=tuple(readings.load_average),
            network_rx_bytes=network_rx,
            network_tx_bytes=network_tx,
            disk_io_read_bytes=disk_io_read,
            disk_io_write_bytes=disk_io_write,
            disk_total_bytes=disk_total,
            disk_used_bytes=disk_used,
            disk_free_bytes=disk_free,
        )
