"""Round-trip latency sampler using the system ping command."""

import logging
import platform
import re
from datetime import datetime

from netgauge.errors import ParseError
from netgauge.models import Measurement, MetricKind
from netgauge.process import run_tool

logger = logging.getLogger(__name__)

LATENCY_MARKER = "time="

_LEADING_NUMBER = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_ping_latency_ms(output: str) -> float:
    """Parse round-trip latency from ping output (pure function).

    Locates the first ``time=`` marker, takes the text up to the next
    whitespace character and parses only its leading numeric run, so both
    the Linux/macOS form ``time=12.3 ms`` and the Windows form ``time=15ms``
    are accepted. No unit conversion is applied.

    Args:
        output: Raw ping output (stdout and stderr combined)

    Returns:
        Latency in milliseconds

    Raises:
        ParseError: The marker is absent or not followed by a number

    Examples:
        >>> parse_ping_latency_ms("icmp_seq=1 ttl=117 time=12.3 ms")
        12.3
        >>> parse_ping_latency_ms("bytes=32 time=15ms TTL=117")
        15.0
    """
    if not output:
        raise ParseError("empty ping output")

    start = output.find(LATENCY_MARKER)
    if start < 0:
        raise ParseError(f"no {LATENCY_MARKER!r} marker in ping output")

    rest = output[start + len(LATENCY_MARKER):]
    token = rest.split(maxsplit=1)[0] if rest and not rest[0].isspace() else ""

    match = _LEADING_NUMBER.match(token)
    if match is None:
        raise ParseError(f"latency value {token!r} is not a number")

    return float(match.group(0))


class PingSampler:
    """Sampler that measures latency with a single ICMP echo.

    Parsing relies on the English ``time=`` token; localized ping builds that
    print e.g. ``Zeit=`` produce a ParseError on every cycle.
    """

    kind = MetricKind.LATENCY_MS

    def __init__(self, timeout_s: float | None = None):
        """Initialize ping sampler.

        Args:
            timeout_s: Optional upper bound on one ping invocation, in seconds.
                       None leaves the invocation unbounded.
        """
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError("timeout_s must be positive")

        self.timeout_s = timeout_s
        self.system = platform.system()

        logger.debug("PingSampler initialized: timeout_s=%s, system=%s", timeout_s, self.system)

    def measure(self, target: str) -> Measurement:
        """Ping the target once and return the reported round-trip time."""
        timestamp = datetime.now()
        output = run_tool(self._build_ping_command(target), timeout=self.timeout_s)
        latency = parse_ping_latency_ms(output)

        logger.debug("Parsed latency: target=%s, latency=%.3fms", target, latency)
        return Measurement(ts=timestamp, target=target, kind=self.kind, value=latency)

    def _build_ping_command(self, target: str) -> list[str]:
        """Build the platform-specific single-echo ping command."""
        if self.system == "Windows":
            return ["ping", "-n", "1", target]
        return ["ping", "-c", "1", target]
