"""System-wide disk I/O summed from per-process interval counters."""

from __future__ import annotations

from typing import Iterable

from resource_sampler.models import IntervalCounter


def aggregate_disk_io(processes: Iterable[IntervalCounter]) -> tuple[int, int]:
    # Interval counters are reset by the provider; no delta tracking here.
    total_read = 0
    total_write = 0
    for process in processes:
        total_read += int(process.read_bytes)
        total_write += int(process.written_bytes)
    return total_read, total_write
