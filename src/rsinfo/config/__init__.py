"""Configuration models and YAML loading for rsinfo."""

from .loader import ConfigError, load_config, load_report_config, load_yaml
from .models import ProjectConfig, ReportConfig, SystemConfig, ToolchainConfig, ToolSpec

__all__ = [
    "ConfigError",
    "ProjectConfig",
    "ReportConfig",
    "SystemConfig",
    "ToolSpec",
    "ToolchainConfig",
    "load_config",
    "load_report_config",
    "load_yaml",
]
