"""Unit tests for IperfSampler."""

from unittest.mock import patch

import pytest

from netgauge.errors import InvalidOutputError, ToolInvocationError
from netgauge.models import MetricKind
from netgauge.sampler import measure_bandwidth
from netgauge.sampler_iperf import IperfSampler


class TestIperfSamplerBuildCommand:
    """Test iperf command construction."""

    def test_default_command(self):
        sampler = IperfSampler()
        cmd = sampler._build_iperf_command("10.0.0.2")
        assert cmd == ["iperf", "-c", "10.0.0.2", "-t", "1", "-f", "k"]

    def test_custom_duration(self):
        sampler = IperfSampler(duration_s=3)
        cmd = sampler._build_iperf_command("10.0.0.2")
        assert cmd[:5] == ["iperf", "-c", "10.0.0.2", "-t", "3"]

    def test_format_flag_disabled(self):
        """Empty or None format leaves iperf's own units."""
        assert IperfSampler(report_format=None)._build_iperf_command("h") == [
            "iperf", "-c", "h", "-t", "1",
        ]
        assert IperfSampler(report_format="")._build_iperf_command("h") == [
            "iperf", "-c", "h", "-t", "1",
        ]


class TestIperfSamplerInitialization:
    """Test IperfSampler configuration."""

    def test_kind(self):
        assert IperfSampler().kind is MetricKind.BANDWIDTH_KBPS

    def test_invalid_duration(self):
        with pytest.raises(ValueError, match="duration_s must be positive"):
            IperfSampler(duration_s=0)

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="timeout_s must be positive"):
            IperfSampler(timeout_s=-1)


class TestIperfSamplerMeasure:
    """Test end-to-end measurement with the tool invocation mocked."""

    def test_measure_returns_bandwidth(self, iperf_output):
        sampler = IperfSampler()
        with patch("netgauge.sampler_iperf.run_tool", return_value=iperf_output):
            measurement = sampler.measure("10.0.0.2")

        assert measurement.kind is MetricKind.BANDWIDTH_KBPS
        assert measurement.target == "10.0.0.2"
        assert measurement.value == 930842.0

    def test_measure_invalid_output(self):
        sampler = IperfSampler()
        output = "iperf: ignoring extra argument\nconnect failed: Connection refused\n"
        with patch("netgauge.sampler_iperf.run_tool", return_value=output):
            with pytest.raises(InvalidOutputError):
                sampler.measure("10.0.0.2")

    def test_measure_tool_error_propagates(self):
        sampler = IperfSampler(timeout_s=5)
        error = ToolInvocationError("iperf could not be started")
        with patch("netgauge.sampler_iperf.run_tool", side_effect=error) as mock_run:
            with pytest.raises(ToolInvocationError):
                sampler.measure("10.0.0.2")
        assert mock_run.call_args.kwargs["timeout"] == 5

    def test_module_level_measure_bandwidth(self, iperf_output):
        with patch("netgauge.sampler_iperf.run_tool", return_value=iperf_output) as mock_run:
            measurement = measure_bandwidth("10.0.0.2")

        assert measurement.value == 930842.0
        assert mock_run.call_args.args[0][:3] == ["iperf", "-c", "10.0.0.2"]
