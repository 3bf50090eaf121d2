"""Report section selection from command-line flags."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sections:
    system: bool
    rust: bool
    project: bool


def resolve_sections(system: bool, rust: bool, project: bool, all_: bool) -> Sections:
    """Resolve flags to sections.

    ``--all``, or no section flag at all, selects every section.
    """
    if all_ or not (system or rust or project):
        return Sections(system=True, rust=True, project=True)
    return Sections(system=system, rust=rust, project=project)
