"""psutil-backed information provider."""

from __future__ import annotations

import logging
import os
import time
from typing import Any

import psutil

from resource_sampler.models import (
    DiskReading,
    NetworkInterfaceReading,
    ProcessDiskReading,
    ProviderReadings,
)

logger = logging.getLogger(__name__)

_PROCESS_ATTRS = ["pid", "create_time", "io_counters"]


def _safe_load_average() -> tuple[float, float, float]:
    try:
        one, five, fifteen = os.getloadavg()
    except (OSError, AttributeError):  # pragma: no cover - platform specific
        return 0.0, 0.0, 0.0
    return float(one), float(five), float(fifteen)


def _uptime_seconds(now: float) -> int:
    try:
        boot_time = float(psutil.boot_time())
    except Exception:  # pragma: no cover - psutil fallback
        return 0
    return int(max(0.0, now - boot_time))


class PsutilProvider:
    """Read the live host through psutil.

    psutil reports per-process I/O as totals since process start, so the
    provider remembers the previous totals per process and hands out the bytes
    moved since its own last ``read``.
    """

    def __init__(self) -> None:
        # Keyed by (pid, create_time) so a recycled pid starts from zero.
        self._previous_io: dict[tuple[int, float | None], tuple[int, int]] = {}
        # Prime cpu_percent so the first read has a reference point.
        psutil.cpu_percent(interval=None, percpu=True)

    def read(self) -> ProviderReadings:
        now = time.time()
        mem = psutil.virtual_memory()
        cached: Any = getattr(mem, "cached", None)
        return ProviderReadings(
            cpu_usage=tuple(float(p) for p in psutil.cpu_percent(interval=None, percpu=True)),
            memory_total=int(mem.total),
            memory_used=int(mem.total - mem.available),
            uptime=_uptime_seconds(now),
            load_average=_safe_load_average(),
            networks=self.read_networks(),
            disks=self.read_disks(),
            processes=self.read_processes(),
            memory_cached=int(cached) if cached is not None else None,
        )

    def read_networks(self) -> tuple[NetworkInterfaceReading, ...]:
        counters = psutil.net_io_counters(pernic=True) or {}
        return tuple(
            NetworkInterfaceReading(
                name=name,
                total_received=int(iface.bytes_recv),
                total_transmitted=int(iface.bytes_sent),
            )
            for name, iface in counters.items()
        )

    def read_disks(self) -> tuple[DiskReading, ...]:
        disks: list[DiskReading] = []
        seen: set[str] = set()
        for part in psutil.disk_partitions(all=False):
            if part.mountpoint in seen:
                continue
            seen.add(part.mountpoint)
            try:
                usage = psutil.disk_usage(part.mountpoint)
            except (PermissionError, OSError) as exc:
                logger.debug("Skipping mount point %s: %s", part.mountpoint, exc)
                continue
            disks.append(
                DiskReading(
                    mount_point=part.mountpoint,
                    total_space=int(usage.total),
                    available_space=int(usage.free),
                )
            )
        return tuple(disks)

    def read_processes(self) -> tuple[ProcessDiskReading, ...]:
        current: dict[tuple[int, float | None], tuple[int, int]] = {}
        readings: list[ProcessDiskReading] = []
        for proc in psutil.process_iter(attrs=_PROCESS_ATTRS):
            try:
                info = proc.info
                io_counters = info.get("io_counters")
                if io_counters is None:
                    continue
                pid = int(info["pid"])
                key = (pid, info.get("create_time"))
                totals = (int(io_counters.read_bytes), int(io_counters.write_bytes))
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
            current[key] = totals
            previous = self._previous_io.get(key)
            if previous is None:
                read_delta = written_delta = 0
            else:
                read_delta = max(0, totals[0] - previous[0])
                written_delta = max(0, totals[1] - previous[1])
            readings.append(ProcessDiskReading(pid, read_delta, written_delta))
        self._previous_io = current
        return tuple(readings)
