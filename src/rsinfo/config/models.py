"""Pydantic models for rsinfo configuration."""

from typing import Literal

from pydantic import BaseModel, Field


class SystemConfig(BaseModel):
    """Which host groups the system report queries."""

    os: bool = True
    memory: bool = True
    cpu: bool = True
    shell_env_var: str = "SHELL"


class ToolSpec(BaseModel):
    """An auxiliary command-line tool whose version is reported."""

    name: str
    executable: str
    version_flag: str = "--version"


def _default_tools() -> list[ToolSpec]:
    return [
        ToolSpec(name="Cargo", executable="cargo"),
        ToolSpec(name="Rustup", executable="rustup"),
    ]


class ToolchainConfig(BaseModel):
    """Compiler and auxiliary tool probes."""

    compiler: str = "rustc"
    tools: list[ToolSpec] = Field(default_factory=_default_tools)
    timeout: float | None = Field(default=None, gt=0)  # None = wait for the tool


class ProjectConfig(BaseModel):
    """Manifest and lockfile lookup."""

    manifest: str = "Cargo.toml"
    lockfile: str = "Cargo.lock"
    duplicate_policy: Literal["last", "first"] = "last"


class ReportConfig(BaseModel):
    """Top-level rsinfo configuration."""

    system: SystemConfig = Field(default_factory=SystemConfig)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)
