"""Host introspection for the system report."""

from .detector import CpuRecord, HostQuery, HostSnapshot, detect_host

__all__ = ["CpuRecord", "HostQuery", "HostSnapshot", "detect_host"]
