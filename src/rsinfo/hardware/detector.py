"""Individual host detection functions with fallbacks.

Every detector returns ``None`` (or an empty list) when the value cannot be
determined. Turning absence into display text is left to the reporter.
"""

import logging
import platform
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostQuery:
    """Groups of host facts to collect."""

    os: bool = True
    memory: bool = True
    cpu: bool = True


@dataclass(frozen=True)
class CpuRecord:
    brand: str
    vendor_id: str


@dataclass
class HostSnapshot:
    """Raw host facts. ``None`` means not requested or unavailable."""

    os_name: Optional[str] = None
    os_version: Optional[str] = None
    kernel_version: Optional[str] = None
    distribution_id: Optional[str] = None

    mem_total_bytes: Optional[int] = None
    mem_used_bytes: Optional[int] = None
    swap_total_bytes: Optional[int] = None
    swap_used_bytes: Optional[int] = None

    cpu_arch: Optional[str] = None
    cpu_cores: Optional[int] = None
    cpu_threads: Optional[int] = None
    cpus: list[CpuRecord] = field(default_factory=list)


def _os_release() -> dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def detect_os_name() -> Optional[str]:
    """Display name of the operating system, e.g. ``Ubuntu`` or ``macOS``."""
    system = platform.system()
    if system == "Linux":
        name = _os_release().get("NAME")
        if name:
            return name
    elif system == "Darwin":
        return "macOS" if platform.mac_ver()[0] else "Darwin"
    return system or None


def detect_os_version() -> Optional[str]:
    """Operating system version, e.g. ``22.04`` or ``14.2.1``."""
    system = platform.system()
    if system == "Linux":
        release = _os_release()
        return release.get("VERSION_ID") or release.get("BUILD_ID") or None
    if system == "Darwin":
        return platform.mac_ver()[0] or None
    return platform.release() or None


def detect_kernel_version() -> Optional[str]:
    if platform.system() == "Windows":
        return platform.version() or None
    return platform.release() or None


def detect_distribution_id() -> Optional[str]:
    """Distribution identifier (``ID`` in os-release), else the platform name."""
    if platform.system() == "Linux":
        distro_id = _os_release().get("ID")
        if distro_id:
            return distro_id
    system = platform.system()
    return system.lower() if system else None


def detect_cpu_arch() -> Optional[str]:
    return platform.machine() or None


def detect_memory() -> tuple[Optional[int], Optional[int], Optional[int], Optional[int]]:
    """Return (total, used, swap_total, swap_used) in bytes."""
    try:
        import psutil

        mem = psutil.virtual_memory()
        swap = psutil.swap_memory()
        return mem.total, mem.used, swap.total, swap.used
    except Exception as e:
        logger.warning(f"Memory detection failed: {e}")
        return None, None, None, None


def detect_cpu_counts() -> tuple[Optional[int], Optional[int]]:
    """Return (physical cores, logical threads)."""
    try:
        import psutil

        return psutil.cpu_count(logical=False), psutil.cpu_count(logical=True)
    except Exception as e:
        logger.warning(f"CPU count detection failed: {e}")
        return None, None


def detect_cpus() -> list[CpuRecord]:
    """Describe the host CPU package.

    py-cpuinfo reports one aggregate record for the machine, so the list
    holds at most one entry.
    """
    try:
        import cpuinfo

        info = cpuinfo.get_cpu_info()
    except Exception as e:
        logger.warning(f"CPU detection failed: {e}")
        return []

    brand = (info.get("brand_raw") or "").strip()
    vendor = (info.get("vendor_id_raw") or "").strip()
    if not brand and not vendor:
        return []
    return [CpuRecord(brand=brand, vendor_id=vendor)]


def detect_host(query: Optional[HostQuery] = None) -> HostSnapshot:
    """Collect the requested host facts.

    Groups left out of ``query`` stay ``None`` in the snapshot.
    """
    query = query or HostQuery()
    snapshot = HostSnapshot()

    if query.os:
        snapshot.os_name = detect_os_name()
        snapshot.os_version = detect_os_version()
        snapshot.kernel_version = detect_kernel_version()
        snapshot.distribution_id = detect_distribution_id()

    if query.memory:
        (
            snapshot.mem_total_bytes,
            snapshot.mem_used_bytes,
            snapshot.swap_total_bytes,
            snapshot.swap_used_bytes,
        ) = detect_memory()

    if query.cpu:
        snapshot.cpu_arch = detect_cpu_arch()
        snapshot.cpu_cores, snapshot.cpu_threads = detect_cpu_counts()
        snapshot.cpus = detect_cpus()

    logger.debug(f"Host snapshot: {snapshot}")
    return snapshot
