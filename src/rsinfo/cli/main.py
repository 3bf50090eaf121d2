"""rsinfo CLI - Main entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console

from rsinfo import __version__
from rsinfo.collectors.system_info import collect_system_info, display_system_info
from rsinfo.config.loader import ConfigError, load_report_config
from rsinfo.hardware.detector import HostQuery
from rsinfo.project.manifest import collect_project_info, display_project_info
from rsinfo.toolchain.report import collect_toolchain_info, display_toolchain_info

from .sections import resolve_sections

logger = logging.getLogger(__name__)

_log_handler: logging.Handler | None = None


def _setup_logging(verbose: bool) -> None:
    """Send rsinfo logs to stderr, replacing any handler from a previous run."""
    global _log_handler

    package_logger = logging.getLogger("rsinfo")
    if _log_handler is not None:
        package_logger.removeHandler(_log_handler)

    _log_handler = logging.StreamHandler()
    _log_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    )
    package_logger.addHandler(_log_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.command()
@click.version_option(version=__version__, prog_name="rsinfo")
@click.option("--system", is_flag=True, help="Show system information")
@click.option("--rust", is_flag=True, help="Show Rust toolchain information")
@click.option("--project", is_flag=True, help="Show Cargo project information")
@click.option("--all", "all_", is_flag=True, help="Show every section (the default)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="RSINFO_CONFIG",
    help="YAML configuration file",
)
@click.option("-v", "--verbose", is_flag=True, help="Log detection details to stderr")
def cli(system, rust, project, all_, config_path, verbose):
    """rsinfo - report on this machine, its Rust toolchain, and the Cargo
    project in the current directory.
    """
    _setup_logging(verbose)
    console = Console(highlight=False, soft_wrap=True)

    try:
        config = load_report_config(config_path)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e

    sections = resolve_sections(system, rust, project, all_)
    logger.debug(f"Selected sections: {sections}")

    if sections.system:
        query = HostQuery(
            os=config.system.os,
            memory=config.system.memory,
            cpu=config.system.cpu,
        )
        display_system_info(
            collect_system_info(query, shell_env_var=config.system.shell_env_var),
            console,
        )
        console.print()

    if sections.rust:
        display_toolchain_info(collect_toolchain_info(config.toolchain), console)
        console.print()

    if sections.project:
        info = collect_project_info(
            manifest_name=config.project.manifest,
            lockfile_name=config.project.lockfile,
            duplicate_policy=config.project.duplicate_policy,
        )
        display_project_info(info, console)
        console.print()


if __name__ == "__main__":
    cli()
