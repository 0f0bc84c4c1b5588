"""Global configuration values for the resource sampler."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_INTERVAL_ENV = "RESOURCE_SAMPLER_INTERVAL"
_DEFAULT_INTERVAL = 1.0


def _interval_from_env() -> float:
    raw = os.environ.get(_INTERVAL_ENV)
    if not raw:
        return _DEFAULT_INTERVAL
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", _INTERVAL_ENV, raw)
        return _DEFAULT_INTERVAL
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", _INTERVAL_ENV, raw)
        return _DEFAULT_INTERVAL
    return value


@dataclass(frozen=True)
class CollectorConfig:
    """Polling settings for the background collector."""

    interval_seconds: float = _DEFAULT_INTERVAL
    min_delay_seconds: float = 0.1  # floor between two cycles


@dataclass(frozen=True)
class HistoryConfig:
    """Sizing for rolling history windows (in samples)."""

    short_window: int = 60


CONFIG = CollectorConfig(interval_seconds=_interval_from_env())
HISTORY = HistoryConfig()
