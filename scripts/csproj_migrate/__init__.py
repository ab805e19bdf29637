"""Legacy .csproj to SDK-style project migration package."""

from .cli import main, migrate_project, migrate_projects, translate_project
from .project_parser import load_legacy_project
from .project_models import (
    BuildHook,
    MigrationOptions,
    MigrationResult,
    PackageMetadata,
    PackageReference,
    ProjectReference,
)

__all__ = [
    "main", "migrate_project", "migrate_projects", "translate_project", "load_legacy_project",
    "BuildHook", "MigrationOptions", "MigrationResult", "PackageMetadata",
    "PackageReference", "ProjectReference",
]
