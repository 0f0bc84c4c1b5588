"""Background polling loop owning one provider and one sampler."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

from resource_sampler.core import CONFIG, HISTORY
from resource_sampler.models import InformationProvider, ResourceSnapshot
from resource_sampler.sampling import DiskFilterPolicy, ResourceSampler

from .history import SystemHistory

logger = logging.getLogger(__name__)


class DataCollector:
    """Poll the provider on a fixed interval and keep a rolling history.

    Polling runs under ``_collect_lock``, which makes one cycle at a time
    the sole owner of the provider and sampler. Results are published
    under ``_lock``, so readers never wait on a slow poll.
    """

    def __init__(
        self,
        provider: InformationProvider,
        interval: float = CONFIG.interval_seconds,
        history_size: int = HISTORY.short_window,
        disk_filter: DiskFilterPolicy | None = None,
    ) -> None:
        self._provider = provider
        self._interval = interval
        self._disk_filter = disk_filter
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.RLock()
        self._collect_lock = threading.Lock()

        self._sampler: ResourceSampler | None = None
        self._current: ResourceSnapshot | None = None
        self._history = SystemHistory(maxlen=history_size)
        self._diagnostics: dict[str, Any] = {
            "last_run_started": None,
            "last_run_duration": 0.0,
            "last_success_at": None,
            "consecutive_failures": 0,
            "last_error": None,
        }

    @property
    def current(self) -> ResourceSnapshot | None:
        with self._lock:
            return self._current

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="DataCollector", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        thread = self._thread
        if thread and thread.is_alive():
            thread.join(timeout=timeout)
        self._thread = None

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            current = self._current.to_dict() if self._current else None
            return {
                "current": current,
                "diagnostics": dict(self._diagnostics),
            }

    def history(self) -> list[dict[str, Any]]:
        with self._lock:
            return [point.to_dict() for point in self._history.data_points()]

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()

    def collect_once(self) -> ResourceSnapshot | None:
        """Run one cycle synchronously; failures are logged, not raised."""

        with self._collect_lock:
            start_time = time.perf_counter()
            try:
                snapshot = self._collect()
            except Exception as exc:
                logger.exception("Resource collection cycle failed")
                self._update_diagnostics(
                    success=False, duration=time.perf_counter() - start_time, error=exc
                )
                return None

            with self._lock:
                self._current = snapshot
                self._history.add_data_point(snapshot)
            self._update_diagnostics(success=True, duration=time.perf_counter() - start_time)
        return snapshot

    def _run(self) -> None:
        while not self._stop.is_set():
            start_time = time.perf_counter()
            self.collect_once()
            elapsed = time.perf_counter() - start_time
            delay = max(CONFIG.min_delay_seconds, self._interval - elapsed)
            self._stop.wait(delay)

    def _collect(self) -> ResourceSnapshot:
        # Caller holds _collect_lock; provider and sampler are touched only here.
        readings = self._provider.read()
        if self._sampler is None:
            # First cycle only establishes the network baseline.
            self._sampler = ResourceSampler(readings.networks, disk_filter=self._disk_filter)
            logger.debug("Sampler created with %s disk policy", self._sampler.disk_filter.name)
        return self._sampler.collect(readings)

    def _update_diagnostics(
        self, *, success: bool, duration: float, error: Exception | None = None
    ) -> None:
        now = time.time()
        with self._lock:
            self._diagnostics["last_run_started"] = now - duration
            self._diagnostics["last_run_duration"] = duration
            if success:
                self._diagnostics["last_success_at"] = now
                self._diagnostics["consecutive_failures"] = 0
            else:
                self._diagnostics["consecutive_failures"] += 1
                self._diagnostics["last_error"] = {
                    "message": str(error),
                    "type": error.__class__.__name__,
                    "timestamp": now,
                }
