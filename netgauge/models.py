"""Data models for netgauge measurements."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MetricKind(str, Enum):
    """The two readings netgauge collects."""

    LATENCY_MS = "latency_ms"
    BANDWIDTH_KBPS = "bandwidth_kbps"

    @property
    def metric_name(self) -> str:
        """Name of the exposed Prometheus gauge for this kind."""
        return f"network_{self.value}"


@dataclass
class Measurement:
    """A single successful reading from one sampler invocation."""

    ts: datetime
    target: str
    kind: MetricKind
    value: float

    def __post_init__(self):
        """Normalize kind and value so callers may pass plain str/int."""
        self.kind = MetricKind(self.kind)
        self.value = float(self.value)
