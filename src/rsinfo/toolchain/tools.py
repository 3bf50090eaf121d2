"""Version probes for auxiliary command-line tools (cargo, rustup)."""

import logging
import shutil
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .process import CommandRunner, ToolInvocationError, Which, run_version_command

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ToolInfo:
    name: str
    version: str


def extract_version_number(output: str) -> str:
    """Return the second whitespace-separated word of ``output``.

    Tools print ``"<tool> X.Y.Z (...)"``; anything shorter yields
    ``"Unknown"``.
    """
    parts = output.split()
    if len(parts) < 2:
        return UNKNOWN
    return parts[1]


def collect_tool_info(
    name: str,
    executable: str,
    version_flag: str = "--version",
    timeout: Optional[float] = None,
    runner: CommandRunner = run_version_command,
    which: Which = shutil.which,
) -> ToolInfo:
    """Probe one tool for its self-reported version.

    The tool is only spawned when ``which`` finds it on the search path.
    """
    if which(executable) is None:
        logger.debug(f"{executable} not found on PATH")
        return ToolInfo(name=name, version=f"{name} not found.")

    try:
        output = runner([executable, version_flag], timeout)
    except ToolInvocationError as e:
        logger.warning(f"Failed to get {name} version: {e}")
        return ToolInfo(name=name, version=f"Failed to get {name} version.")

    return ToolInfo(name=name, version=extract_version_number(output))


def display_tool_info(info: ToolInfo, console: Console) -> None:
    console.print(f"  [bold]{escape(info.name)}[/bold]")
    console.print("  " + "-" * len(info.name))
    console.print(f"    Version: {escape(info.version)}")
