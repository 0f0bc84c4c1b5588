"""Raw readings handed to the sampler by an information provider.

Two kinds of counters reach the sampler and they must not be mixed up:

* ``CumulativeCounter`` values grow since boot (network interfaces). The
  sampler keeps its own baseline and turns them into rates.
* ``IntervalCounter`` values already cover only the provider's last
  refresh interval (per-process disk I/O). They are summed as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class CumulativeCounter(Protocol):
    """Byte counters accumulated since boot; require delta tracking."""

    @property
    def total_received(self) -> int: ...

    @property
    def total_transmitted(self) -> int: ...


class IntervalCounter(Protocol):
    """Byte counters covering only the provider's current interval."""

    @property
    def read_bytes(self) -> int: ...

    @property
    def written_bytes(self) -> int: ...


@dataclass(frozen=True, slots=True)
class NetworkInterfaceReading:
    name: str
    total_received: int
    total_transmitted: int


@dataclass(frozen=True, slots=True)
class ProcessDiskReading:
    pid: int
    read_bytes: int
    written_bytes: int


@dataclass(frozen=True, slots=True)
class DiskReading:
    mount_point: str
    total_space: int
    available_space: int


@dataclass(frozen=True, slots=True)
class ProviderReadings:
    """Everything one sampling call needs, already materialized."""

    cpu_usage: tuple[float, ...]
    memory_total: int
    memory_used: int
    uptime: int
    load_average: tuple[float, float, float]
    networks: tuple[CumulativeCounter, ...] = field(default_factory=tuple)
    disks: tuple[DiskReading, ...] = field(default_factory=tuple)
    processes: tuple[IntervalCounter, ...] = field(default_factory=tuple)
    memory_cached: int | None = None


class InformationProvider(Protocol):
    """Source of fresh readings; refreshes itself on every ``read``."""

    def read(self) -> ProviderReadings: ...
