"""
External Tool Adapter for rustdetect

Runs the binutils-style analysis tools (strings, nm, readelf, objdump) that
produce the raw text the detectors scan. The adapter never inspects content:
it returns stdout or a failure, and every failure mode (tool not installed,
non-zero exit, timeout, exhausted run budget) is reported as a value rather
than an exception.

All invocations in one run share a single Deadline measured from the start
of the run. A command started after the budget is spent fails immediately.
"""

import logging
import shutil
import subprocess
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Deadline:
    """Time budget shared by every external invocation of a run."""

    def __init__(self, budget_seconds: float = DEFAULT_TIMEOUT) -> None:
        if budget_seconds < 0:
            raise ValueError(f"Time budget must be non-negative, got {budget_seconds}")
        self.budget_seconds = budget_seconds
        self._started = time.monotonic()

    def remaining(self) -> float:
        """Seconds left in the budget, never negative."""
        elapsed = time.monotonic() - self._started
        return max(0.0, self.budget_seconds - elapsed)

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


@dataclass(frozen=True)
class ToolOutput:
    """Raw result of one external tool invocation."""

    command: tuple[str, ...]
    success: bool
    stdout: str = ""
    error: str = ""  # Diagnostic for logs only

    @property
    def tool_name(self) -> str:
        return self.command[0] if self.command else ""


def tool_available(tool: str) -> bool:
    """Check if an external tool is installed."""
    return shutil.which(tool) is not None


def get_available_tools(tools: list[str]) -> dict[str, bool]:
    """Get availability status of external tools."""
    return {tool: tool_available(tool) for tool in tools}


def run_tool(command: list[str], deadline: Deadline) -> ToolOutput:
    """Run an external analysis command under the shared deadline.

    Args:
        command: argv list, tool name first and the binary path last
        deadline: Shared time budget for the run

    Returns:
        ToolOutput with stdout on success, or success=False on any failure
    """
    argv = tuple(command)
    if not argv:
        return ToolOutput(command=argv, success=False, error="empty command")

    tool = argv[0]
    if not tool_available(tool):
        logger.debug("%s not installed", tool)
        return ToolOutput(command=argv, success=False, error="tool not installed")

    if deadline.expired:
        logger.debug("%s skipped: deadline exceeded", tool)
        return ToolOutput(command=argv, success=False, error="deadline exceeded")

    remaining = deadline.remaining()
    logger.debug("Running %s (%.1fs left)", " ".join(argv), remaining)
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            timeout=remaining,
        )
    except subprocess.TimeoutExpired:
        logger.debug("%s timeout", tool)
        return ToolOutput(command=argv, success=False, error="timeout")
    except OSError as e:
        logger.debug("%s could not be started: %s", tool, e)
        return ToolOutput(command=argv, success=False, error=str(e))

    if result.returncode != 0:
        logger.debug("%s exited with status %d", tool, result.returncode)
        return ToolOutput(
            command=argv,
            success=False,
            error=f"exit status {result.returncode}",
        )

    # Tool output may contain arbitrary bytes; it is still scanned as text
    stdout = result.stdout.decode("utf-8", errors="replace")
    return ToolOutput(command=argv, success=True, stdout=stdout)
