"""Models exported by the resource sampler."""

from .readings import (
    CumulativeCounter,
    DiskReading,
    InformationProvider,
    IntervalCounter,
    NetworkInterfaceReading,
    ProcessDiskReading,
    ProviderReadings,
)
from .resource_snapshot import ResourceSnapshot

__all__ = [
    "CumulativeCounter",
    "DiskReading",
    "InformationProvider",
    "IntervalCounter",
    "NetworkInterfaceReading",
    "ProcessDiskReading",
    "ProviderReadings",
    "ResourceSnapshot",
]
