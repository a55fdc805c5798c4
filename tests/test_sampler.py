"""Tests for netgauge.sampler.build_samplers."""

from netgauge.config import Settings
from netgauge.fake_sampler import FakeSampler
from netgauge.models import MetricKind
from netgauge.sampler import build_samplers
from netgauge.sampler_iperf import IperfSampler
from netgauge.sampler_ping import PingSampler


class TestBuildSamplers:
    """Test sampler selection from settings."""

    def test_real_samplers(self):
        settings = Settings(
            target="10.0.0.2", iperf_duration_s=2, iperf_format=None, tool_timeout_s=4.0
        )

        ping, iperf = build_samplers(settings)

        assert isinstance(ping, PingSampler)
        assert ping.timeout_s == 4.0
        assert isinstance(iperf, IperfSampler)
        assert iperf.duration_s == 2
        assert iperf.report_format is None
        assert iperf.timeout_s == 4.0

    def test_fake_samplers(self):
        samplers = build_samplers(Settings(target="sim", sampler="fake"))

        assert all(isinstance(s, FakeSampler) for s in samplers)
        assert [s.kind for s in samplers] == [MetricKind.LATENCY_MS, MetricKind.BANDWIDTH_KBPS]
