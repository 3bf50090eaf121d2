"""Rust compiler metadata from ``rustc -vV``.

Example output::

    rustc 1.75.0 (82e1608df 2023-12-21)
    binary: rustc
    commit-hash: 82e1608dfa6e0b5569232559e3d385fea5a93112
    commit-date: 2023-12-21
    host: x86_64-unknown-linux-gnu
    release: 1.75.0
    LLVM version: 17.0.6
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .process import CommandRunner, ToolInvocationError, Which, run_version_command

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class Channel(Enum):
    DEV = "Dev"
    NIGHTLY = "Nightly"
    BETA = "Beta"
    STABLE = "Stable"
    UNKNOWN = "Unknown"

    @classmethod
    def from_release(cls, release: Optional[str]) -> "Channel":
        """Map a release string such as ``1.77.0-nightly`` to its channel."""
        if not release:
            return cls.UNKNOWN
        _, sep, pre = release.partition("-")
        if not sep:
            return cls.STABLE
        if pre.startswith("dev"):
            return cls.DEV
        if pre.startswith("nightly"):
            return cls.NIGHTLY
        if pre.startswith("beta"):
            return cls.BETA
        return cls.STABLE


@dataclass(frozen=True)
class CompilerInfo:
    version: str
    host: str = UNKNOWN
    release: str = UNKNOWN
    commit_hash: str = UNKNOWN
    commit_date: str = UNKNOWN
    channel: Channel = Channel.UNKNOWN
    llvm_version: str = UNKNOWN


def parse_version_verbose(output: str) -> CompilerInfo:
    """Build CompilerInfo from ``rustc -vV`` output.

    Fields missing from the output are reported as ``"Unknown"``.
    """
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        return CompilerInfo(version=UNKNOWN)

    fields: dict[str, str] = {}
    for line in lines[1:]:
        key, sep, value = line.partition(":")
        if sep:
            fields[key.strip()] = value.strip()

    short_version = lines[0]
    release = fields.get("release")
    if not release:
        words = short_version.split()
        release = words[1] if len(words) > 1 else None

    return CompilerInfo(
        version=release or UNKNOWN,
        host=fields.get("host") or UNKNOWN,
        release=short_version,
        commit_hash=fields.get("commit-hash") or UNKNOWN,
        commit_date=fields.get("commit-date") or UNKNOWN,
        channel=Channel.from_release(release),
        llvm_version=fields.get("LLVM version") or UNKNOWN,
    )


def collect_compiler_info(
    executable: str = "rustc",
    timeout: Optional[float] = None,
    runner: CommandRunner = run_version_command,
    which: Which = shutil.which,
) -> CompilerInfo:
    """Query the active compiler. Never raises."""
    if which(executable) is None:
        logger.debug(f"{executable} not found on PATH")
        return CompilerInfo(version=f"{executable} not found.")

    try:
        output = runner([executable, "-vV"], timeout)
    except ToolInvocationError as e:
        logger.warning(f"Failed to read {executable} metadata: {e}")
        return CompilerInfo(version=f"Failed to get {executable} version.")

    return parse_version_verbose(output)


def display_compiler_info(info: CompilerInfo, name: str, console: Console) -> None:
    rows = [
        ("Version", info.version),
        ("Release", info.release),
        ("Host", info.host),
        ("Commit Hash", info.commit_hash),
        ("Commit Date", info.commit_date),
        ("Channel", info.channel.value),
        ("LLVM Version", info.llvm_version),
    ]
    width = max(len(label) for label, _ in rows) + 1

    console.print(f"  [bold]{escape(name)}[/bold]")
    console.print("  " + "-" * len(name))
    for label, value in rows:
        console.print(f"    {label + ':':<{width}} {escape(value)}")
