"""Sampler abstraction for netgauge measurement sources."""

from typing import Protocol

from netgauge.config import Settings
from netgauge.fake_sampler import FakeSampler
from netgauge.models import Measurement, MetricKind
from netgauge.sampler_iperf import IperfSampler
from netgauge.sampler_ping import PingSampler


class Sampler(Protocol):
    """Protocol for anything that turns a target into one reading.

    Implementations return a Measurement of their ``kind`` or raise a
    :class:`netgauge.errors.SampleError` subclass.
    """

    kind: MetricKind

    def measure(self, target: str) -> Measurement:
        """Take a single reading against the given target."""
        ...


def measure_latency(target: str) -> Measurement:
    """Measure round-trip latency to target with a default PingSampler."""
    return PingSampler().measure(target)


def measure_bandwidth(target: str) -> Measurement:
    """Measure bandwidth to target with a default IperfSampler."""
    return IperfSampler().measure(target)


def build_samplers(settings: Settings) -> list[Sampler]:
    """Create one sampler per metric kind according to settings."""
    if settings.sampler == "fake":
        return [FakeSampler(MetricKind.LATENCY_MS), FakeSampler(MetricKind.BANDWIDTH_KBPS)]

    return [
        PingSampler(timeout_s=settings.tool_timeout_s),
        IperfSampler(
            duration_s=settings.iperf_duration_s,
            report_format=settings.iperf_format,
            timeout_s=settings.tool_timeout_s,
        ),
    ]
