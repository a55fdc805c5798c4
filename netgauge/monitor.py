"""Owns the collection loops for one target."""

import logging

from PySide6.QtCore import QObject, QThreadPool

from netgauge.collection_loop import CollectionLoop
from netgauge.config import DEFAULT_INTERVAL_MS
from netgauge.gauge_store import GaugeStore
from netgauge.sampler import Sampler

logger = logging.getLogger(__name__)


class NetworkMonitor(QObject):
    """Runs one CollectionLoop per sampler against a single target.

    Loops share nothing but the gauge store. Cycles execute on a private
    thread pool with one thread per loop, so a hung tool in one loop cannot
    starve the other.
    """

    def __init__(
        self,
        samplers: list[Sampler],
        target: str,
        store: GaugeStore,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        parent=None,
    ):
        super().__init__(parent)

        kinds = [sampler.kind for sampler in samplers]
        if len(set(kinds)) != len(kinds):
            raise ValueError("each metric kind may have only one sampler")

        self.target = target
        self.store = store

        self.thread_pool = QThreadPool(self)
        self.thread_pool.setMaxThreadCount(max(1, len(samplers)))

        self.loops = [
            CollectionLoop(
                sampler,
                target,
                store,
                interval_ms=interval_ms,
                thread_pool=self.thread_pool,
                parent=self,
            )
            for sampler in samplers
        ]

    def start(self):
        """Start every loop."""
        for loop in self.loops:
            loop.start()
        logger.info("Monitoring started: target=%s, loops=%d", self.target, len(self.loops))

    def stop(self, wait_ms: int = 0) -> bool:
        """Stop every loop, optionally waiting for in-flight cycles.

        Args:
            wait_ms: Milliseconds to wait for running cycles (0 = don't wait)

        Returns:
            False if a cycle was still running when the wait expired, i.e. a
            tool invocation is hung and its pool thread cannot be joined
        """
        for loop in self.loops:
            loop.stop()

        finished = True
        if wait_ms > 0:
            finished = self.thread_pool.waitForDone(wait_ms)
            if not finished:
                logger.warning("Cycles still running after %dms; a tool invocation is hung", wait_ms)

        logger.info("Monitoring stopped: target=%s", self.target)
        return finished

    def get_stats(self):
        """Get per-loop statistics keyed by metric kind."""
        return {loop.kind.value: loop.get_stats() for loop in self.loops}
