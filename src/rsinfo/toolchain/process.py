"""Subprocess capability used by the toolchain probes."""

import logging
import subprocess
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# (argv, timeout) -> decoded stdout
CommandRunner = Callable[[list[str], Optional[float]], str]

# executable name -> resolved path or None
Which = Callable[[str], Optional[str]]


class ToolInvocationError(Exception):
    """Raised when a tool cannot be run or exits unsuccessfully."""


def run_version_command(argv: list[str], timeout: Optional[float] = None) -> str:
    """Run ``argv`` and return its standard output.

    Output is decoded as UTF-8 with invalid bytes replaced. Standard error
    is discarded.

    Raises:
        ToolInvocationError: If the process cannot be started, times out,
            or exits with a non-zero status.
    """
    try:
        result = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ToolInvocationError(f"{argv[0]}: {e}") from e

    if result.returncode != 0:
        raise ToolInvocationError(f"{argv[0]} exited with code {result.returncode}")

    stdout = result.stdout.decode("utf-8", errors="replace")
    logger.debug(f"{' '.join(argv)} -> {stdout.strip()!r}")
    return stdout
