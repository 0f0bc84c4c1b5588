"""Rate tracking and aggregation algorithms."""

from .disk_capacity import (
    AllDisksPolicy,
    DiskFilterPolicy,
    RootMountPolicy,
    aggregate_disk_capacity,
    select_disk_filter,
)
from .disk_io import aggregate_disk_io
from .network import NetworkBaseline, NetworkRateTracker, compute_rate
from .sampler import ResourceSampler

__all__ = [
    "AllDisksPolicy",
    "DiskFilterPolicy",
    "NetworkBaseline",
    "NetworkRateTracker",
    "ResourceSampler",
    "RootMountPolicy",
    "aggregate_disk_capacity",
    "aggregate_disk_io",
    "compute_rate",
    "select_disk_filter",
]
