"""Cargo.toml / Cargo.lock reading and the dependency table."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class ManifestError(Exception):
    """Raised when a manifest or lockfile cannot be read or parsed."""


@dataclass(frozen=True)
class DependencyInfo:
    name: str
    specified_version: str
    resolved_version: str


@dataclass(frozen=True)
class ProjectInfo:
    name: str = UNKNOWN
    version: str = UNKNOWN
    dependencies: list[DependencyInfo] = field(default_factory=list)


def load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML document.

    Raises:
        ManifestError: If the file is missing, unreadable, or invalid TOML.
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise ManifestError(f"File not found: {path}") from None
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e


def _string_or_unknown(value: Any) -> str:
    return value if isinstance(value, str) else UNKNOWN


def read_lockfile_versions(path: Path, duplicate_policy: str = "last") -> dict[str, str]:
    """Map package name to resolved version from a lockfile.

    Returns an empty mapping when the lockfile is absent or unparseable.
    With ``duplicate_policy="last"`` a later record for the same name
    replaces an earlier one; ``"first"`` keeps the earliest.
    """
    try:
        lock = load_toml(path)
    except ManifestError as e:
        logger.debug(f"No lockfile versions: {e}")
        return {}

    records = lock.get("package", [])
    if not isinstance(records, list):
        return {}

    versions: dict[str, str] = {}
    for record in records:
        if not isinstance(record, dict):
            continue
        name = record.get("name")
        version = record.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            continue
        if name in versions:
            logger.debug(f"Duplicate lockfile entry for {name}: {versions[name]}, {version}")
            if duplicate_policy == "first":
                continue
        versions[name] = version
    return versions


def specified_version(entry: Any) -> str:
    """Version constraint of a ``[dependencies]`` entry.

    ``foo = "1.0"`` yields ``"1.0"``; ``foo = { version = "1.0", ... }``
    yields the table's ``version``.
    """
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        return _string_or_unknown(entry.get("version"))
    return UNKNOWN


def collect_project_info(
    directory: Path | None = None,
    manifest_name: str = "Cargo.toml",
    lockfile_name: str = "Cargo.lock",
    duplicate_policy: str = "last",
) -> ProjectInfo:
    """Read the project in ``directory`` (default: current directory).

    A missing or invalid manifest yields an empty report rather than an
    error.
    """
    directory = directory if directory is not None else Path.cwd()

    try:
        manifest = load_toml(directory / manifest_name)
    except ManifestError as e:
        logger.debug(f"No project manifest: {e}")
        return ProjectInfo()

    package = manifest.get("package")
    if not isinstance(package, dict):
        package = {}

    resolved = read_lockfile_versions(directory / lockfile_name, duplicate_policy)

    declared = manifest.get("dependencies")
    if not isinstance(declared, dict):
        declared = {}

    dependencies = [
        DependencyInfo(
            name=name,
            specified_version=specified_version(entry),
            resolved_version=resolved.get(name, UNKNOWN),
        )
        for name, entry in declared.items()
    ]

    return ProjectInfo(
        name=_string_or_unknown(package.get("name")),
        version=_string_or_unknown(package.get("version")),
        dependencies=dependencies,
    )


def display_project_info(info: ProjectInfo, console: Console) -> None:
    """Print the project section."""
    title = "Project Information"
    console.print(f"[bold]{title}[/bold]")
    console.print("=" * len(title))
    console.print(f"  Name:    {escape(info.name)}")
    console.print(f"  Version: {escape(info.version)}")

    if not info.dependencies:
        console.print("  Dependencies: None")
        return

    console.print("  Dependencies:")
    for dep in info.dependencies:
        console.print(
            f"    - {escape(dep.name)} {escape(dep.specified_version)} "
            f"({escape(dep.resolved_version)})"
        )
