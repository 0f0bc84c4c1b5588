"""Shared fixtures: synthetic readings and a controllable clock."""

import pytest

from resource_sampler.models import NetworkInterfaceReading, ProviderReadings


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_readings(**overrides):
    values = dict(
        cpu_usage=(10.0, 20.0),
        memory_total=8_000,
        memory_used=3_000,
        uptime=3600,
        load_average=(0.5, 0.4, 0.3),
    )
    values.update(overrides)
    return ProviderReadings(**values)


def nic(name, rx, tx):
    return NetworkInterfaceReading(name=name, total_received=rx, total_transmitted=tx)


@pytest.fixture
def clock():
    return FakeClock()
