"""Entry point for the netgauge exporter."""

import logging
import os
import signal
import sys

from PySide6.QtCore import QCoreApplication, QTimer

from netgauge.config import Settings
from netgauge.errors import ConfigError
from netgauge.exposition import MetricsServer
from netgauge.gauge_store import GaugeStore
from netgauge.logging_config import configure_logging
from netgauge.monitor import NetworkMonitor
from netgauge.sampler import build_samplers

# Configure logging early
configure_logging()
logger = logging.getLogger(__name__)

# How often the event loop hands control back to Python so that signal
# handlers run even while every loop is blocked in a tool.
SIGNAL_POLL_MS = 500

# Grace period for in-flight cycles at shutdown
SHUTDOWN_WAIT_MS = 1000


def main():
    """Main entry point for the netgauge exporter."""
    # Configuration errors are fatal before anything starts
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        print(str(e), file=sys.stderr)
        sys.exit(1)

    store = GaugeStore()

    server = MetricsServer(store, port=settings.port, addr=settings.bind_address)
    try:
        server.start()
    except OSError as e:
        logger.error(
            "Failed to start HTTP server: addr=%s, port=%d, error=%s",
            settings.bind_address,
            settings.port,
            e,
        )
        print(f"Failed to start HTTP server: {e}", file=sys.stderr)
        sys.exit(1)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv)

    samplers = build_samplers(settings)
    if settings.sampler == "fake":
        logger.info("Using simulated samplers (NETGAUGE_SAMPLER=fake)")

    monitor = NetworkMonitor(samplers, settings.target, store, interval_ms=settings.interval_ms)

    signal.signal(signal.SIGINT, lambda *args: app.quit())
    signal.signal(signal.SIGTERM, lambda *args: app.quit())

    # No-op slot; Python only checks for pending signals between bytecodes
    signal_poll = QTimer()
    signal_poll.timeout.connect(lambda: None)
    signal_poll.start(SIGNAL_POLL_MS)

    monitor.start()
    exit_code = app.exec()
    signal_poll.stop()

    shutdown(monitor, server, exit_code)


def shutdown(
    monitor: NetworkMonitor,
    server: MetricsServer,
    exit_code: int,
    wait_ms: int = SHUTDOWN_WAIT_MS,
):
    """Stop loops and server, log a summary and exit the process.

    Never returns. Falls back to os._exit when a cycle is still blocked in a
    tool after ``wait_ms``.
    """
    logger.info("Shutting down")
    finished = monitor.stop(wait_ms=wait_ms)
    server.stop()

    for kind, stats in monitor.get_stats().items():
        logger.info(
            "Loop summary: kind=%s, cycles=%d, successes=%d, failures=%d, last_error=%s",
            kind,
            stats["cycles"],
            stats["successes"],
            stats["failures"],
            stats["last_error"],
        )

    if not finished:
        # A hung tool keeps its pool thread alive, and the pool's destructor
        # would wait for it forever.
        logger.warning("Exiting without joining hung sampling threads")
        logging.shutdown()
        os._exit(exit_code)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
