"""Toolchain section: compiler plus auxiliary tools."""

import shutil
from dataclasses import dataclass, field

from rich.console import Console

from rsinfo.config.models import ToolchainConfig

from .compiler import CompilerInfo, collect_compiler_info, display_compiler_info
from .process import CommandRunner, Which, run_version_command
from .tools import ToolInfo, collect_tool_info, display_tool_info


@dataclass(frozen=True)
class ToolchainInfo:
    compiler_name: str
    compiler: CompilerInfo
    tools: list[ToolInfo] = field(default_factory=list)


def collect_toolchain_info(
    config: ToolchainConfig | None = None,
    runner: CommandRunner = run_version_command,
    which: Which = shutil.which,
) -> ToolchainInfo:
    """Probe the compiler and every configured tool.

    Each probe runs regardless of how the others fared.
    """
    config = config or ToolchainConfig()

    compiler = collect_compiler_info(
        config.compiler, timeout=config.timeout, runner=runner, which=which
    )
    tools = [
        collect_tool_info(
            spec.name,
            spec.executable,
            version_flag=spec.version_flag,
            timeout=config.timeout,
            runner=runner,
            which=which,
        )
        for spec in config.tools
    ]
    return ToolchainInfo(compiler_name=config.compiler, compiler=compiler, tools=tools)


def display_toolchain_info(info: ToolchainInfo, console: Console) -> None:
    """Print the toolchain section."""
    title = "Rust Toolchain"
    console.print(f"[bold]{title}[/bold]")
    console.print("=" * len(title))
    display_compiler_info(info.compiler, info.compiler_name, console)
    for tool in info.tools:
        display_tool_info(tool, console)
