"""Legacy project data model classes.

Pure value records produced by the extraction functions and consumed by the
SDK project generator. No behavior or imports from other migrate modules.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LegacyProject:
    """A parsed legacy ``.csproj`` file.

    The tree is only ever queried. The generated SDK project is assembled from
    extracted values, never by editing this tree.

    Attributes:
        path: Filesystem path of the ``.csproj`` file.
        root: Root ``<Project>`` element.
    """
    path: Path
    root: ET.Element


@dataclass(frozen=True)
class PackagesConfig:
    """A parsed ``packages.config`` lock file.

    Attributes:
        path: Filesystem path of the lock file.
        root: Root ``<packages>`` element.
    """
    path: Path
    root: ET.Element


@dataclass(frozen=True)
class ProjectReference:
    """A ``<ProjectReference Include="...">`` entry.

    Attributes:
        path: The ``Include`` value, kept exactly as written (e.g. ``..\\Lib\\Lib.csproj``).
    """
    path: str


@dataclass(frozen=True)
class PackageReference:
    """A NuGet package pinned to a version.

    Attributes:
        id: Package id (e.g. ``Newtonsoft.Json``).
        version: Version string (e.g. ``13.0.1``).
    """
    id: str
    version: str


@dataclass(frozen=True)
class BuildHook:
    """A pre- or post-build command.

    Attributes:
        kind: ``PreBuild`` or ``PostBuild``.
        command: Command text exactly as found in the legacy project.
    """
    kind: str
    command: str


@dataclass(frozen=True)
class PackageMetadata:
    """Package identity fields imported from a ``.nuspec`` file."""
    id: str
    version: str
    title: str
    authors: str
    description: str


@dataclass(frozen=True)
class MigrationOptions:
    """Settings threaded through a migration run.

    Attributes:
        verbose: Print per-stage diagnostics and timings.
        dry_run: Print the generated project instead of writing it.
        make_package: Embed package metadata and ``GeneratePackageOnBuild``.
        nuspec_path: ``.nuspec`` file to import metadata from when ``make_package`` is set.
        target_framework: Value of ``<TargetFramework>`` in the generated project.
        max_input_bytes: Upper bound on the size of any XML input file.
    """
    verbose: bool = False
    dry_run: bool = False
    make_package: bool = False
    nuspec_path: Optional[Path] = None
    target_framework: str = "net5.0"
    max_input_bytes: int = 16 * 1024 * 1024


@dataclass
class MigrationResult:
    """Outcome of migrating a single project.

    Attributes:
        project_path: The legacy project that was processed.
        content: Generated SDK project text, or ``None`` if migration failed.
        written: Whether the content was written back to ``project_path``.
        error: Error message for a failed migration, else ``None``.
        elapsed_ms: Wall-clock time spent on this project.
    """
    project_path: Path
    content: Optional[str] = None
    written: bool = False
    error: Optional[str] = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None
