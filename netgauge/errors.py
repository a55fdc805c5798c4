"""Exception types raised by netgauge."""


class SampleError(Exception):
    """A measurement attempt failed; the next scheduled cycle tries again."""


class ToolInvocationError(SampleError):
    """The diagnostic tool could not be started or did not exit cleanly."""

    def __init__(self, message: str, *, returncode: int | None = None, output: str | None = None):
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class InvalidOutputError(SampleError):
    """Tool output lacks the lines or fields the parser expects."""


class ParseError(SampleError):
    """A located substring is not a number."""


class ConfigError(Exception):
    """Required configuration is missing or malformed."""
