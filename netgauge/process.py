"""Run external diagnostic tools and capture their combined output."""

import logging
import subprocess

from netgauge.errors import ToolInvocationError

logger = logging.getLogger(__name__)


def run_tool(cmd: list[str], timeout: float | None = None) -> str:
    """Execute a diagnostic command and return stdout and stderr as one string.

    Args:
        cmd: Command and arguments; executed directly, never through a shell.
        timeout: Seconds to wait for the process, or None to wait indefinitely.

    Returns:
        Combined output, decoded as text.

    Raises:
        ToolInvocationError: The command could not be started, timed out, or
            exited with a non-zero status.
    """
    tool = cmd[0]
    logger.debug("Executing tool: cmd=%s, timeout=%s", " ".join(cmd), timeout)

    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            timeout=timeout,
            shell=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ToolInvocationError(f"{tool} timed out after {timeout}s") from e
    except OSError as e:
        # Missing binary, permission denied, ...
        raise ToolInvocationError(f"{tool} could not be started: {e}") from e

    logger.debug("Tool completed: tool=%s, returncode=%d", tool, result.returncode)

    if result.returncode != 0:
        output = result.stdout or ""
        raise ToolInvocationError(
            f"{tool} exited with status {result.returncode}: {output.strip()[:200] or '(no output)'}",
            returncode=result.returncode,
            output=output,
        )

    return result.stdout or ""
