"""Latest-value store for the exposed network gauges."""

import logging

from prometheus_client import CollectorRegistry, Gauge

from netgauge.models import MetricKind

logger = logging.getLogger(__name__)

INITIAL_VALUE = 0.0

_HELP = {
    MetricKind.BANDWIDTH_KBPS: "Measured network bandwidth in Kilobits per second (kbps)",
    MetricKind.LATENCY_MS: "Measured network latency in milliseconds (ms)",
}


class GaugeStore:
    """Holds the most recent reading for each metric kind.

    Backed by one prometheus_client Gauge per kind in a private registry, so
    the exposition layer can serve it directly. Gauge values sit behind the
    library's per-value mutex: a read sees either the old or the new value.

    Thread-safe: one writer per kind (its collection loop), any number of
    concurrent readers.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """Create the gauges in ``registry`` (a fresh one by default)."""
        self.registry = registry if registry is not None else CollectorRegistry()
        self._gauges = {
            kind: Gauge(kind.metric_name, _HELP[kind], registry=self.registry)
            for kind in MetricKind
        }

    def set(self, kind: MetricKind, value: float) -> None:
        """Replace the stored value for kind."""
        self._gauges[MetricKind(kind)].set(value)

    def get(self, kind: MetricKind) -> float:
        """Return the last value set for kind, or 0.0 before the first set."""
        gauge = self._gauges[MetricKind(kind)]
        samples = gauge.collect()[0].samples
        return samples[-1].value if samples else INITIAL_VALUE

    def snapshot(self) -> dict[MetricKind, float]:
        """Current value of every kind."""
        return {kind: self.get(kind) for kind in MetricKind}
