"""Tests for the Cargo project report."""

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console

from rsinfo.project.manifest import (
    DependencyInfo,
    ManifestError,
    ProjectInfo,
    collect_project_info,
    display_project_info,
    load_toml,
    read_lockfile_versions,
    specified_version,
)

MANIFEST = """\
[package]
name = "demo"
version = "0.3.1"
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }
foo = "1.0"
local = { path = "../local" }
anyhow = "1"
"""

LOCKFILE = """\
version = 3

[[package]]
name = "anyhow"
version = "1.0.79"

[[package]]
name = "demo"
version = "0.3.1"

[[package]]
name = "foo"
version = "1.0.3"

[[package]]
name = "serde"
version = "1.0.195"
"""


@pytest.fixture
def project_dir(tmp_path):
    """Write a manifest and optional lockfile into a temp directory."""

    def _create(manifest: str | None = MANIFEST, lockfile: str | None = LOCKFILE) -> Path:
        if manifest is not None:
            (tmp_path / "Cargo.toml").write_text(manifest)
        if lockfile is not None:
            (tmp_path / "Cargo.lock").write_text(lockfile)
        return tmp_path

    return _create


def _render(info: ProjectInfo) -> str:
    buf = io.StringIO()
    display_project_info(info, Console(file=buf, highlight=False, soft_wrap=True))
    return buf.getvalue()


class TestLoadToml:
    def test_missing(self, tmp_path):
        with pytest.raises(ManifestError, match="not found"):
            load_toml(tmp_path / "Cargo.toml")

    def test_invalid(self, tmp_path):
        path = tmp_path / "Cargo.toml"
        path.write_text("[package\nname = ")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_toml(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "Cargo.toml"
        path.write_bytes(b'[package]\nname = "\xff"\n')
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_toml(path)


class TestSpecifiedVersion:
    def test_string(self):
        assert specified_version("1.0") == "1.0"

    def test_table(self):
        assert specified_version({"version": "2.0", "features": ["derive"]}) == "2.0"

    def test_table_without_version(self):
        assert specified_version({"git": "https://example.com/repo.git"}) == "Unknown"

    def test_other_type(self):
        assert specified_version(3) == "Unknown"


class TestReadLockfileVersions:
    def test_versions(self, project_dir):
        versions = read_lockfile_versions(project_dir(manifest=None) / "Cargo.lock")
        assert versions["foo"] == "1.0.3"
        assert versions["serde"] == "1.0.195"

    def test_missing_lockfile(self, tmp_path):
        assert read_lockfile_versions(tmp_path / "Cargo.lock") == {}

    def test_invalid_lockfile(self, project_dir):
        path = project_dir(manifest=None, lockfile="[[package]\n") / "Cargo.lock"
        assert read_lockfile_versions(path) == {}

    def test_incomplete_records_skipped(self, project_dir):
        lock = '[[package]]\nname = "a"\n\n[[package]]\nversion = "1.0"\n'
        path = project_dir(manifest=None, lockfile=lock) / "Cargo.lock"
        assert read_lockfile_versions(path) == {}

    def test_invalid_utf8_lockfile(self, tmp_path):
        (tmp_path / "Cargo.lock").write_bytes(
            b'[[package]]\nname = "foo"\nversion = "\xff1.0"\n'
        )
        assert read_lockfile_versions(tmp_path / "Cargo.lock") == {}

    def test_duplicate_names(self, project_dir, caplog):
        lock = (
            '[[package]]\nname = "rand"\nversion = "0.7.3"\n\n'
            '[[package]]\nname = "rand"\nversion = "0.8.5"\n'
        )
        path = project_dir(manifest=None, lockfile=lock) / "Cargo.lock"
        with caplog.at_level(logging.DEBUG, logger="rsinfo.project.manifest"):
            assert read_lockfile_versions(path) == {"rand": "0.8.5"}
        assert any(
            r.levelno == logging.DEBUG and "Duplicate lockfile entry for rand" in r.getMessage()
            for r in caplog.records
        )
        assert read_lockfile_versions(path, duplicate_policy="first") == {"rand": "0.7.3"}


class TestCollectProjectInfo:
    def test_cross_reference(self, project_dir):
        info = collect_project_info(project_dir())
        assert info.name == "demo"
        assert info.version == "0.3.1"
        assert info.dependencies == [
            DependencyInfo("serde", "1.0", "1.0.195"),
            DependencyInfo("foo", "1.0", "1.0.3"),
            DependencyInfo("local", "Unknown", "Unknown"),
            DependencyInfo("anyhow", "1", "1.0.79"),
        ]

    def test_single_dependency(self, project_dir):
        directory = project_dir(
            manifest='[dependencies]\nfoo = "1.0"\n',
            lockfile='[[package]]\nname = "foo"\nversion = "1.0.3"\n',
        )
        info = collect_project_info(directory)
        assert info.dependencies == [
            DependencyInfo(name="foo", specified_version="1.0", resolved_version="1.0.3")
        ]
        assert info.name == "Unknown"
        assert info.version == "Unknown"

    def test_missing_manifest(self, tmp_path):
        info = collect_project_info(tmp_path)
        assert info == ProjectInfo(name="Unknown", version="Unknown", dependencies=[])

    def test_invalid_manifest(self, project_dir):
        assert collect_project_info(project_dir(manifest="not = [toml")) == ProjectInfo()

    def test_invalid_utf8_manifest(self, tmp_path):
        (tmp_path / "Cargo.toml").write_bytes(b'[package]\nname = "\xff"\n')
        assert collect_project_info(tmp_path) == ProjectInfo()

    def test_invalid_utf8_lockfile_leaves_versions_unknown(self, project_dir):
        directory = project_dir(lockfile=None)
        (directory / "Cargo.lock").write_bytes(b'[[package]]\nname = "foo"\nversion = "\xff"\n')
        info = collect_project_info(directory)
        assert info.name == "demo"
        assert all(dep.resolved_version == "Unknown" for dep in info.dependencies)

    def test_no_lockfile(self, project_dir):
        info = collect_project_info(project_dir(lockfile=None))
        assert all(dep.resolved_version == "Unknown" for dep in info.dependencies)
        assert info.dependencies[1].specified_version == "1.0"

    def test_defaults_to_cwd(self, project_dir, monkeypatch):
        monkeypatch.chdir(project_dir())
        assert collect_project_info().name == "demo"

    def test_workspace_inherited_version(self, project_dir):
        manifest = '[package]\nname = "member"\nversion.workspace = true\n'
        info = collect_project_info(project_dir(manifest=manifest, lockfile=None))
        assert info.name == "member"
        assert info.version == "Unknown"

    def test_custom_file_names(self, tmp_path):
        (tmp_path / "Other.toml").write_text('[package]\nname = "other"\n')
        info = collect_project_info(tmp_path, manifest_name="Other.toml")
        assert info.name == "other"


class TestDisplayProjectInfo:
    def test_no_dependencies(self):
        output = _render(ProjectInfo())
        assert "Name:    Unknown" in output
        assert "Dependencies: None" in output

    def test_dependency_lines(self, project_dir):
        output = _render(collect_project_info(project_dir()))
        assert output.splitlines()[0] == "Project Information"
        assert "    - foo 1.0 (1.0.3)" in output
        assert "    - serde 1.0 (1.0.195)" in output
        assert output.index("serde") < output.index("anyhow")
