"""Per-metric sampling loop: Sampling -> Idle -> Sampling."""

import logging

from PySide6.QtCore import QObject, QThreadPool, QTimer

from netgauge.config import DEFAULT_INTERVAL_MS
from netgauge.errors import SampleError
from netgauge.gauge_store import GaugeStore
from netgauge.models import Measurement
from netgauge.sampler import Sampler
from netgauge.workers import CycleWorker

logger = logging.getLogger(__name__)


class CollectionLoop(QObject):
    """Repeatedly samples one metric kind and writes it to the gauge store.

    Each cycle runs on a thread-pool worker, so a slow tool never blocks the
    event loop or the other loop. When the cycle finishes, a single-shot timer
    holds the loop Idle for ``interval_ms`` before the next cycle, so cycles
    of one loop never overlap.

    A failed sample leaves the stored value untouched; the loop carries on at
    the next cycle. ``stop()`` is checked on entry to Idle: an in-flight cycle
    still completes, but nothing further is scheduled.
    """

    def __init__(
        self,
        sampler: Sampler,
        target: str,
        store: GaugeStore,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        thread_pool: QThreadPool | None = None,
        parent=None,
    ):
        """Initialize collection loop.

        Args:
            sampler: Sampler for this loop's metric kind
            target: Target address, shared read-only with the other loop
            store: Gauge store receiving successful readings
            interval_ms: Idle time between the end of one cycle and the next
            thread_pool: Pool executing cycles (default: global instance)
            parent: Qt parent object
        """
        super().__init__(parent)

        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

        self.sampler = sampler
        self.kind = sampler.kind
        self.target = target
        self.store = store
        self.interval_ms = interval_ms

        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        # Idle timer; re-armed after every cycle
        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self._start_cycle)

        self.is_running = False
        self._in_flight = False
        self._worker = None

        # Statistics
        self._cycles = 0
        self._successes = 0
        self._failures = 0
        self._last_error = None

    def start(self):
        """Start sampling; the first cycle is scheduled immediately."""
        if self.is_running:
            return

        self.is_running = True
        logger.info(
            "Collection loop started: kind=%s, target=%s, interval=%dms",
            self.kind.value,
            self.target,
            self.interval_ms,
        )
        if not self._in_flight:
            self._start_cycle()

    def stop(self):
        """Stop scheduling cycles. An in-flight cycle is allowed to finish."""
        if not self.is_running:
            return

        self.is_running = False
        self.timer.stop()
        logger.info("Collection loop stopped: kind=%s", self.kind.value)

    def run_cycle(self) -> Measurement | None:
        """Take one sample and record it (blocking).

        Returns:
            The Measurement written to the store, or None if sampling failed
        """
        self._cycles += 1
        try:
            measurement = self.sampler.measure(self.target)
        except SampleError as e:
            self._failures += 1
            self._last_error = f"{type(e).__name__}: {e}"
            logger.warning(
                "Sample failed: kind=%s, target=%s, error=%s",
                self.kind.value,
                self.target,
                self._last_error,
            )
            return None

        self.store.set(self.kind, measurement.value)
        self._successes += 1

        logger.debug(
            "Gauge updated: kind=%s, target=%s, value=%s",
            self.kind.value,
            self.target,
            measurement.value,
        )
        return measurement

    def _start_cycle(self):
        """Enter Sampling: hand one cycle to the thread pool."""
        if not self.is_running or self._in_flight:
            return

        self._in_flight = True

        worker = CycleWorker(self.run_cycle, self.kind.value)
        worker.signals.finished.connect(self._on_cycle_finished)
        # Keep the signals object alive until finished is delivered
        self._worker = worker

        self.thread_pool.start(worker)

    def _on_cycle_finished(self):
        """Enter Idle, unless stopped while the cycle was running."""
        self._in_flight = False
        self._worker = None

        if not self.is_running:
            logger.debug("Loop not re-armed after stop: kind=%s", self.kind.value)
            return

        self.timer.start(self.interval_ms)

    def get_stats(self):
        """Get loop statistics.

        Returns:
            Dict with loop state info
        """
        return {
            "kind": self.kind.value,
            "running": self.is_running,
            "in_flight": self._in_flight,
            "cycles": self._cycles,
            "successes": self._successes,
            "failures": self._failures,
            "last_error": self._last_error,
        }
