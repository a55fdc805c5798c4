"""Worker classes for background sampling cycles."""

import logging
from typing import Callable

from PySide6.QtCore import QObject, QRunnable, Signal

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """Signals for communicating between worker threads and main thread."""

    finished = Signal()  # Emits when the cycle completes, successful or not


class CycleWorker(QRunnable):
    """Worker that executes one collection cycle in a pool thread."""

    def __init__(self, cycle: Callable[[], object], name: str):
        super().__init__()
        self.cycle = cycle
        self.name = name
        self.signals = WorkerSignals()

    def run(self):
        """Execute the cycle in background thread."""
        try:
            logger.debug("Worker starting: loop=%s", self.name)

            # May block for as long as the external tool runs
            self.cycle()

            logger.debug("Worker completed: loop=%s", self.name)

        except Exception as e:
            logger.exception("Worker exception: loop=%s, error=%s", self.name, str(e))

        finally:
            # Always signal completion so the loop re-arms its idle timer
            self.signals.finished.emit()
