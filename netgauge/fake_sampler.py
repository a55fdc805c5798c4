"""Simulated sampler for running netgauge without ping or iperf."""

import random
from datetime import datetime

from netgauge.errors import ToolInvocationError
from netgauge.models import Measurement, MetricKind

# (base value, normal variance) per kind
_PROFILES = {
    MetricKind.LATENCY_MS: (25.0, 5.0),
    MetricKind.BANDWIDTH_KBPS: (940000.0, 20000.0),
}


class FakeSampler:
    """Generates plausible readings with occasional spikes and failures."""

    def __init__(self, kind: MetricKind, seed: int | None = None):
        """Initialize with optional random seed for deterministic behavior."""
        self.kind = MetricKind(kind)
        # Isolated random instance; each loop thread owns its sampler
        self._random = random.Random(seed)

        self.base_value, self.variance = _PROFILES[self.kind]
        self.spike_probability = 0.05
        self.spike_multiplier = 3.0
        self.failure_probability = 0.02

    def measure(self, target: str) -> Measurement:
        """Generate a single simulated reading for the given target."""
        if not target or not target.strip():
            raise ValueError("Target cannot be empty")

        timestamp = datetime.now()

        if self._random.random() < self.failure_probability:
            raise ToolInvocationError(f"simulated {self.kind.value} probe failure")

        value = self.base_value + self._random.gauss(0, self.variance)
        if self._random.random() < self.spike_probability:
            # Latency spikes up, bandwidth collapses
            if self.kind is MetricKind.LATENCY_MS:
                value *= self.spike_multiplier
            else:
                value /= self.spike_multiplier

        value = max(0.1, value)

        return Measurement(ts=timestamp, target=target, kind=self.kind, value=round(value, 2))
