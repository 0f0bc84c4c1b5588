"""Network throughput derived from cumulative interface counters."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from resource_sampler.models import CumulativeCounter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NetworkBaseline:
    last_sample_time: float
    last_rx_total: int
    last_tx_total: int


def sum_counters(networks: Iterable[CumulativeCounter]) -> tuple[int, int]:
    rx_total = 0
    tx_total = 0
    for interface in networks:
        rx_total += int(interface.total_received)
        tx_total += int(interface.total_transmitted)
    return rx_total, tx_total


def _rate(current: int, previous: int, elapsed: float, direction: str) -> int:
    if current < previous:
        logger.debug(
            "Network %s counter went backwards (%d -> %d); reporting zero rate",
            direction,
            previous,
            current,
        )
        return 0
    return int((current - previous) / elapsed)


def compute_rate(
    networks: Iterable[CumulativeCounter],
    baseline: NetworkBaseline,
    now: float,
) -> tuple[int, int, NetworkBaseline]:
    """Return ``(rx_rate, tx_rate, new_baseline)`` in bytes per second.

    A non-positive elapsed time yields zero for both directions. A counter
    lower than the baseline (interface reset, wrap, or an interface that
    disappeared) yields zero for that direction only. The new baseline
    always records the totals just observed.
    """

    rx_total, tx_total = sum_counters(networks)
    elapsed = now - baseline.last_sample_time
    if elapsed <= 0:
        rx_rate = tx_rate = 0
    else:
        rx_rate = _rate(rx_total, baseline.last_rx_total, elapsed, "rx")
        tx_rate = _rate(tx_total, baseline.last_tx_total, elapsed, "tx")
    return rx_rate, tx_rate, NetworkBaseline(now, rx_total, tx_total)


class NetworkRateTracker:
    """Keeps the network baseline between sampling calls."""

    def __init__(
        self,
        networks: Iterable[CumulativeCounter],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._baseline = self.initialize(networks)

    @property
    def baseline(self) -> NetworkBaseline:
        return self._baseline

    def initialize(self, networks: Iterable[CumulativeCounter]) -> NetworkBaseline:
        rx_total, tx_total = sum_counters(networks)
        return NetworkBaseline(self._clock(), rx_total, tx_total)

    def compute_rate(self, networks: Iterable[CumulativeCounter]) -> tuple[int, int]:
        rx_rate, tx_rate, self._baseline = compute_rate(
            networks, self._baseline, self._clock()
        )
        return rx_rate, tx_rate
