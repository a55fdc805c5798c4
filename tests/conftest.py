"""Shared fixtures for netgauge tests."""

import pytest
from PySide6.QtCore import QCoreApplication

from netgauge.gauge_store import GaugeStore

_LINUX_PING_OUTPUT = """\
PING 10.0.0.2 (10.0.0.2) 56(84) bytes of data.
64 bytes from 10.0.0.2: icmp_seq=1 ttl=64 time=12.3 ms

--- 10.0.0.2 ping statistics ---
1 packets transmitted, 1 received, 0% packet loss, time 0ms
rtt min/avg/max/mdev = 12.345/12.345/12.345/0.000 ms
"""

_IPERF_OUTPUT = """\
------------------------------------------------------------
Client connecting to 10.0.0.2, TCP port 5001
TCP window size: 85.0 KByte (default)
------------------------------------------------------------
[  1] local 10.0.0.1 port 50512 connected with 10.0.0.2 port 5001 (icwnd/mss/irtt=14/1448/312)
[ ID] Interval       Transfer     Bandwidth
[  1] 0.0000-1.0094 sec  114688 KBytes  930842 Kbits/sec
"""


@pytest.fixture(scope="module")
def qapp():
    """Create QCoreApplication instance for tests."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def store():
    """Fresh gauge store with its own registry."""
    return GaugeStore()


@pytest.fixture
def linux_ping_output():
    """Output of a successful single-echo Linux ping."""
    return _LINUX_PING_OUTPUT


@pytest.fixture
def iperf_output():
    """Output of a successful iperf2 client run with -f k."""
    return _IPERF_OUTPUT
