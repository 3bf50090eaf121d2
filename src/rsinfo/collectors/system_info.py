"""System information collection and display."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.markup import escape

from rsinfo.hardware.detector import HostQuery, HostSnapshot, detect_host

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
BYTES_PER_GB = 1024**3


@dataclass(frozen=True)
class SystemInfo:
    """Formatted host summary."""

    os: str
    cpu: str
    cpu_cores: int
    memory: str
    shell: str
    kernel: str = UNKNOWN
    distribution: str = UNKNOWN
    arch: str = UNKNOWN
    cpu_vendor: str = UNKNOWN
    cpu_threads: int = 0
    swap: str = UNKNOWN


def format_memory(used_bytes: Optional[int], total_bytes: Optional[int]) -> str:
    """Render a used/total pair as ``"1.00 GB / 2.00 GB"``."""
    if used_bytes is None or total_bytes is None:
        return UNKNOWN
    used_gb = used_bytes / BYTES_PER_GB
    total_gb = total_bytes / BYTES_PER_GB
    return f"{used_gb:.2f} GB / {total_gb:.2f} GB"


def format_os(name: Optional[str], version: Optional[str]) -> str:
    return f"{name or UNKNOWN} {version or ''}".strip()


def build_system_info(snapshot: HostSnapshot, shell: Optional[str]) -> SystemInfo:
    """Apply display defaults to a raw host snapshot."""
    first_cpu = snapshot.cpus[0] if snapshot.cpus else None

    return SystemInfo(
        os=format_os(snapshot.os_name, snapshot.os_version),
        cpu=(first_cpu.brand if first_cpu and first_cpu.brand else UNKNOWN),
        cpu_cores=snapshot.cpu_cores or 0,
        memory=format_memory(snapshot.mem_used_bytes, snapshot.mem_total_bytes),
        shell=shell or UNKNOWN,
        kernel=snapshot.kernel_version or UNKNOWN,
        distribution=snapshot.distribution_id or UNKNOWN,
        arch=snapshot.cpu_arch or UNKNOWN,
        cpu_vendor=(first_cpu.vendor_id if first_cpu and first_cpu.vendor_id else UNKNOWN),
        cpu_threads=snapshot.cpu_threads or 0,
        swap=format_memory(snapshot.swap_used_bytes, snapshot.swap_total_bytes),
    )


def collect_system_info(
    query: Optional[HostQuery] = None, shell_env_var: str = "SHELL"
) -> SystemInfo:
    """Collect current system information.

    Returns:
        SystemInfo with every field populated, unavailable values shown
        as ``"Unknown"``.
    """
    snapshot = detect_host(query)
    shell = os.environ.get(shell_env_var)
    if not shell:
        logger.debug(f"${shell_env_var} is not set")
    return build_system_info(snapshot, shell)


def display_system_info(info: SystemInfo, console: Console) -> None:
    """Print the system section."""
    rows = [
        ("OS", info.os),
        ("Kernel", info.kernel),
        ("Distribution", info.distribution),
        ("CPU", info.cpu),
        ("CPU Vendor", info.cpu_vendor),
        ("CPU Cores", str(info.cpu_cores)),
        ("CPU Threads", str(info.cpu_threads)),
        ("Architecture", info.arch),
        ("Memory", info.memory),
        ("Swap", info.swap),
        ("Shell", info.shell),
    ]
    width = max(len(label) for label, _ in rows) + 1

    title = "System Information"
    console.print(f"[bold]{title}[/bold]")
    console.print("=" * len(title))
    for label, value in rows:
        console.print(f"  {label + ':':<{width}} {escape(value)}")
