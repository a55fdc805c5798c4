"""Environment-driven configuration for netgauge."""

import os
from dataclasses import dataclass
from typing import Mapping

from netgauge.errors import ConfigError

TARGET_ENV = "TARGET_IP"
DEFAULT_PORT = 8330
MAX_PORT = 65535
DEFAULT_INTERVAL_MS = 5000

SAMPLER_CHOICES = ("real", "fake")


@dataclass(frozen=True)
class Settings:
    """Process configuration, read once at startup and never mutated."""

    target: str
    port: int = DEFAULT_PORT
    bind_address: str = "0.0.0.0"
    interval_ms: int = DEFAULT_INTERVAL_MS
    iperf_duration_s: int = 1
    iperf_format: str | None = "k"
    tool_timeout_s: float | None = None
    sampler: str = "real"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Environment Variables:
            TARGET_IP: Host or IP literal to measure (required)
            NETGAUGE_PORT: Metrics port (default 8330)
            NETGAUGE_BIND_ADDRESS: Metrics bind address (default 0.0.0.0)
            NETGAUGE_INTERVAL_MS: Idle time between cycles (default 5000)
            NETGAUGE_IPERF_DURATION_S: iperf test length (default 1)
            NETGAUGE_IPERF_FORMAT: iperf -f unit letter (default "k", empty disables)
            NETGAUGE_TOOL_TIMEOUT_S: Optional per-invocation timeout
            NETGAUGE_SAMPLER: "real" (default) or "fake"

        Raises:
            ConfigError: TARGET_IP is missing, or a value is malformed.
        """
        env = os.environ if environ is None else environ

        target = env.get(TARGET_ENV, "").strip()
        if not target:
            raise ConfigError(f"{TARGET_ENV} environment variable is not set.")

        sampler = env.get("NETGAUGE_SAMPLER", "real").strip().lower() or "real"
        if sampler not in SAMPLER_CHOICES:
            raise ConfigError(
                f"NETGAUGE_SAMPLER must be one of {', '.join(SAMPLER_CHOICES)}, got {sampler!r}"
            )

        timeout_raw = env.get("NETGAUGE_TOOL_TIMEOUT_S", "").strip()

        return cls(
            target=target,
            port=_port(env, "NETGAUGE_PORT"),
            bind_address=env.get("NETGAUGE_BIND_ADDRESS", "0.0.0.0").strip() or "0.0.0.0",
            interval_ms=_positive(env, "NETGAUGE_INTERVAL_MS", DEFAULT_INTERVAL_MS, int),
            iperf_duration_s=_positive(env, "NETGAUGE_IPERF_DURATION_S", 1, int),
            iperf_format=env.get("NETGAUGE_IPERF_FORMAT", "k").strip() or None,
            tool_timeout_s=(
                _positive(env, "NETGAUGE_TOOL_TIMEOUT_S", None, float) if timeout_raw else None
            ),
            sampler=sampler,
        )


def _port(env: Mapping[str, str], name: str) -> int:
    port = _positive(env, name, DEFAULT_PORT, int)
    if port > MAX_PORT:
        raise ConfigError(f"{name} must be between 1 and {MAX_PORT}, got {port}")
    return port


def _positive(env: Mapping[str, str], name: str, default, convert):
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = convert(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value
