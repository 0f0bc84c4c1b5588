"""Tests for snapshot assembly in ResourceSampler."""

import dataclasses

import pytest

from resource_sampler.models import DiskReading, ProcessDiskReading, ResourceSnapshot
from resource_sampler.sampling import AllDisksPolicy, ResourceSampler, RootMountPolicy

from conftest import make_readings, nic

DISKS = (
    DiskReading(mount_point="/", total_space=100, available_space=40),
    DiskReading(mount_point="/boot", total_space=10, available_space=5),
)


class TestConstruction:
    def test_baseline_from_initial_networks(self, clock):
        sampler = ResourceSampler([nic("eth0", 1_000, 200), nic("lo", 24, 24)], clock=clock)
        assert sampler.baseline.last_rx_total == 1_024
        assert sampler.baseline.last_tx_total == 224
        assert sampler.baseline.last_sample_time == clock.now

    def test_default_disk_filter_follows_platform(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "win32")
        assert isinstance(ResourceSampler([]).disk_filter, AllDisksPolicy)
        monkeypatch.setattr("sys.platform", "linux")
        assert isinstance(ResourceSampler([]).disk_filter, RootMountPolicy)


class TestCollect:
    def test_full_snapshot(self, clock):
        sampler = ResourceSampler(
            [nic("eth0", 1_000, 500)], clock=clock, disk_filter=RootMountPolicy()
        )
        clock.advance(2.0)
        readings = make_readings(
            networks=(nic("eth0", 5_000, 1_500),),
            disks=DISKS,
            processes=(
                ProcessDiskReading(pid=1, read_bytes=4_096, written_bytes=1_024),
                ProcessDiskReading(pid=2, read_bytes=4_096, written_bytes=0),
            ),
        )
        snapshot = sampler.collect(readings)
        assert snapshot == ResourceSnapshot(
            cpu_usage=(10.0, 20.0),
            memory_total=8_000,
            memory_used=3_000,
            memory_free=5_000,
            memory_cached=0,
            uptime=3600,
            load_avg=(0.5, 0.4, 0.3),
            network_rx_bytes=2_000,
            network_tx_bytes=500,
            disk_io_read_bytes=8_192,
            disk_io_write_bytes=1_024,
            disk_total_bytes=100,
            disk_used_bytes=60,
            disk_free_bytes=40,
        )

    def test_all_disks_policy(self, clock):
        sampler = ResourceSampler([], clock=clock, disk_filter=AllDisksPolicy())
        snapshot = sampler.collect(make_readings(disks=DISKS))
        assert (
            snapshot.disk_total_bytes,
            snapshot.disk_used_bytes,
            snapshot.disk_free_bytes,
        ) == (110, 65, 45)

    def test_empty_provider(self, clock):
        sampler = ResourceSampler([], clock=clock, disk_filter=RootMountPolicy())
        clock.advance(1.0)
        snapshot = sampler.collect(make_readings(cpu_usage=()))
        assert snapshot.cpu_usage == ()
        assert snapshot.network_rx_bytes == snapshot.network_tx_bytes == 0
        assert snapshot.disk_io_read_bytes == snapshot.disk_io_write_bytes == 0
        assert (snapshot.disk_total_bytes, snapshot.disk_used_bytes, snapshot.disk_free_bytes) == (0, 0, 0)
        assert snapshot.memory_total == 8_000
        assert snapshot.memory_used == 3_000

    def test_constant_counters_zero_rate(self, clock):
        sampler = ResourceSampler([nic("eth0", 10, 10)], clock=clock)
        clock.advance(7.5)
        snapshot = sampler.collect(make_readings(networks=(nic("eth0", 10, 10),)))
        assert (snapshot.network_rx_bytes, snapshot.network_tx_bytes) == (0, 0)

    def test_same_timestamp_zero_rate(self, clock):
        sampler = ResourceSampler([nic("eth0", 0, 0)], clock=clock)
        snapshot = sampler.collect(make_readings(networks=(nic("eth0", 500, 500),)))
        assert (snapshot.network_rx_bytes, snapshot.network_tx_bytes) == (0, 0)

    def test_counter_reset_zero_rate(self, clock):
        sampler = ResourceSampler([nic("eth0", 10_000, 10_000)], clock=clock)
        clock.advance(1.0)
        snapshot = sampler.collect(make_readings(networks=(nic("eth0", 5, 5),)))
        assert (snapshot.network_rx_bytes, snapshot.network_tx_bytes) == (0, 0)
        clock.advance(1.0)
        snapshot = sampler.collect(make_readings(networks=(nic("eth0", 105, 55),)))
        assert (snapshot.network_rx_bytes, snapshot.network_tx_bytes) == (100, 50)

    @pytest.mark.parametrize("total,used", [(0, 0), (16, 0), (16, 16), (2**40, 2**39 + 7)])
    def test_memory_free_is_total_minus_used(self, clock, total, used):
        sampler = ResourceSampler([], clock=clock)
        snapshot = sampler.collect(make_readings(memory_total=total, memory_used=used))
        assert snapshot.memory_free == total - used

    def test_memory_free_clamped_when_used_exceeds_total(self, clock):
        sampler = ResourceSampler([], clock=clock)
        snapshot = sampler.collect(make_readings(memory_total=10, memory_used=12))
        assert snapshot.memory_free == 0
        assert snapshot.memory_used == 12

    def test_memory_cached_from_provider(self, clock):
        sampler = ResourceSampler([], clock=clock)
        snapshot = sampler.collect(make_readings(memory_cached=1_234))
        assert snapshot.memory_cached == 1_234

    def test_snapshot_is_immutable(self, clock):
        snapshot = ResourceSampler([], clock=clock).collect(make_readings())
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.uptime = 0

    def test_to_dict_is_json_friendly(self, clock):
        snapshot = ResourceSampler([], clock=clock).collect(make_readings())
        data = snapshot.to_dict()
        assert data["cpu_usage"] == [10.0, 20.0]
        assert data["load_avg"] == [0.5, 0.4, 0.3]
        assert data["memory_free"] == 5_000
