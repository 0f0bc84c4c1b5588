"""Disk capacity totals over a platform-selected set of disks."""

from __future__ import annotations

import sys
from typing import ClassVar, Iterable, Protocol

from resource_sampler.models import DiskReading

ROOT_MOUNT_POINT = "/"
_ALL_DISK_PLATFORMS = ("win32",)


class DiskFilterPolicy(Protocol):
    name: ClassVar[str]

    def filter(self, disks: Iterable[DiskReading]) -> list[DiskReading]: ...


class RootMountPolicy:
    """Count only the disk mounted at the filesystem root."""

    name: ClassVar[str] = "root-mount"

    def filter(self, disks: Iterable[DiskReading]) -> list[DiskReading]:
        return [disk for disk in disks if disk.mount_point == ROOT_MOUNT_POINT]


class AllDisksPolicy:
    """Count every disk; used where there is no single root mount."""

    name: ClassVar[str] = "all-disks"

    def filter(self, disks: Iterable[DiskReading]) -> list[DiskReading]:
        return list(disks)


def select_disk_filter(platform: str | None = None) -> DiskFilterPolicy:
    """Pick the disk policy for ``platform`` (defaults to ``sys.platform``)."""

    platform = sys.platform if platform is None else platform
    if platform.startswith(_ALL_DISK_PLATFORMS):
        return AllDisksPolicy()
    return RootMountPolicy()


def aggregate_disk_capacity(disks: Iterable[DiskReading]) -> tuple[int, int, int]:
    """Return ``(total, used, free)`` summed disk by disk."""

    total = used = free = 0
    for disk in disks:
        total += disk.total_space
        used += max(0, disk.total_space - disk.available_space)
        free += disk.available_space
    return total, used, free
