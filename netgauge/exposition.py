"""HTTP exposition of the gauge store in Prometheus text format."""

import logging

from prometheus_client import start_http_server

from netgauge.config import DEFAULT_PORT
from netgauge.gauge_store import GaugeStore

logger = logging.getLogger(__name__)

METRICS_PATH = "/metrics"


class MetricsServer:
    """Serves a GaugeStore's registry from a background HTTP thread."""

    def __init__(self, store: GaugeStore, port: int = DEFAULT_PORT, addr: str = "0.0.0.0"):
        self.store = store
        self.port = port
        self.addr = addr
        self._server = None
        self._thread = None

    @property
    def is_running(self) -> bool:
        return self._server is not None

    @property
    def bound_port(self) -> int:
        """Actual listening port (differs from ``port`` when port 0 was requested)."""
        if self._server is None:
            raise RuntimeError("MetricsServer is not running")
        return self._server.server_port

    def start(self) -> None:
        """Bind the listening socket and start serving.

        Raises:
            OSError: The address/port cannot be bound.
        """
        if self._server is not None:
            return

        self._server, self._thread = start_http_server(
            self.port, addr=self.addr, registry=self.store.registry
        )
        logger.info(
            "Metrics server listening: http://%s:%d%s", self.addr, self.bound_port, METRICS_PATH
        )

    def stop(self) -> None:
        """Shut the HTTP server down and release the socket."""
        if self._server is None:
            return

        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join(timeout=5)
        self._server = None
        self._thread = None
        logger.info("Metrics server stopped")
