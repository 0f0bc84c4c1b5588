"""Resource sampler package."""

from __future__ import annotations

__all__ = [
    "DataCollector",
    "ProviderReadings",
    "PsutilProvider",
    "ResourceSampler",
    "ResourceSnapshot",
]

from .collector import DataCollector  # noqa: E402
from .data import PsutilProvider  # noqa: E402
from .models import ProviderReadings, ResourceSnapshot  # noqa: E402
from .sampling import ResourceSampler  # noqa: E402
