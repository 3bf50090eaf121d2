"""Cargo project report: manifest constraints against lockfile versions."""

from .manifest import (
    DependencyInfo,
    ManifestError,
    ProjectInfo,
    collect_project_info,
    display_project_info,
    load_toml,
    read_lockfile_versions,
)

__all__ = [
    "DependencyInfo",
    "ManifestError",
    "ProjectInfo",
    "collect_project_info",
    "display_project_info",
    "load_toml",
    "read_lockfile_versions",
]
