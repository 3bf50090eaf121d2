"""Rust toolchain detection: compiler metadata and auxiliary tool versions."""

from .compiler import Channel, CompilerInfo, collect_compiler_info
from .process import ToolInvocationError, run_version_command
from .tools import ToolInfo, collect_tool_info, extract_version_number

__all__ = [
    "Channel",
    "CompilerInfo",
    "ToolInfo",
    "ToolInvocationError",
    "collect_compiler_info",
    "collect_tool_info",
    "extract_version_number",
    "run_version_command",
]
