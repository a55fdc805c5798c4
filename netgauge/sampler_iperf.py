"""Bandwidth sampler using the iperf (v2) client."""

import logging
from datetime import datetime

from netgauge.errors import InvalidOutputError, ParseError
from netgauge.models import Measurement, MetricKind
from netgauge.process import run_tool

logger = logging.getLogger(__name__)

# Zero-indexed position of the summary line and of the bandwidth figure on it.
SUMMARY_LINE_INDEX = 6
BANDWIDTH_FIELD_INDEX = 6


def parse_iperf_bandwidth_kbps(output: str) -> float:
    """Extract the summary bandwidth figure from iperf client output.

    The figure is positional: the 7th whitespace-separated field of the 7th
    line, e.g. ``930842`` in::

        [  1] 0.0000-1.0094 sec   112 MBytes   930842 Kbits/sec

    Raises:
        InvalidOutputError: Fewer than 7 lines, or fewer than 7 fields on the
            summary line.
        ParseError: The field is not a number.
    """
    lines = output.splitlines() if output else []
    if len(lines) <= SUMMARY_LINE_INDEX:
        raise InvalidOutputError(
            f"expected at least {SUMMARY_LINE_INDEX + 1} lines of iperf output, got {len(lines)}"
        )

    fields = lines[SUMMARY_LINE_INDEX].split()
    if len(fields) <= BANDWIDTH_FIELD_INDEX:
        raise InvalidOutputError(
            f"expected at least {BANDWIDTH_FIELD_INDEX + 1} fields on iperf summary line, "
            f"got {len(fields)}: {lines[SUMMARY_LINE_INDEX]!r}"
        )

    value = fields[BANDWIDTH_FIELD_INDEX]
    try:
        return float(value)
    except ValueError as e:
        raise ParseError(f"bandwidth value {value!r} is not a number") from e


class IperfSampler:
    """Sampler that runs a short iperf client test against the target."""

    kind = MetricKind.BANDWIDTH_KBPS

    def __init__(
        self,
        duration_s: int = 1,
        report_format: str | None = "k",
        timeout_s: float | None = None,
    ):
        """Initialize iperf sampler.

        Args:
            duration_s: Test length passed to ``-t``.
            report_format: Unit letter passed to ``-f`` ("k" = Kbits/sec).
                           None or "" omits the flag and keeps iperf's
                           adaptive units.
            timeout_s: Optional upper bound on one invocation, in seconds.
        """
        if duration_s <= 0:
            raise ValueError("duration_s must be positive")
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError("timeout_s must be positive")

        self.duration_s = duration_s
        self.report_format = report_format or None
        self.timeout_s = timeout_s

        logger.debug(
            "IperfSampler initialized: duration_s=%d, report_format=%s, timeout_s=%s",
            duration_s,
            self.report_format,
            timeout_s,
        )

    def measure(self, target: str) -> Measurement:
        """Run one iperf client test and return the summary bandwidth."""
        timestamp = datetime.now()
        output = run_tool(self._build_iperf_command(target), timeout=self.timeout_s)
        bandwidth = parse_iperf_bandwidth_kbps(output)

        logger.debug("Parsed bandwidth: target=%s, bandwidth=%.1fkbps", target, bandwidth)
        return Measurement(ts=timestamp, target=target, kind=self.kind, value=bandwidth)

    def _build_iperf_command(self, target: str) -> list[str]:
        cmd = ["iperf", "-c", target, "-t", str(self.duration_s)]
        if self.report_format:
            cmd += ["-f", self.report_format]
        return cmd
