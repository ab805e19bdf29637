"""CLI entry point, batch orchestration, and file I/O.

Wires together parsing, classification, and generation to migrate each
legacy project file to the SDK-style format.
"""

import argparse
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

from .detection import is_test_project
from .errors import ConfigurationError, MigrationError, WriteError
from .mapping import POST_BUILD, PRE_BUILD, PROJECT_GLOB
from .nuspec_parser import parse_nuspec
from .packages_config import find_packages_config, translate_packages_config
from .project_models import MigrationOptions, MigrationResult
from .project_parser import (
    extract_build_hook,
    extract_project_references,
    load_legacy_project,
    resolve_output_type,
)
from .sdk_project_generator import generate_sdk_project


def find_projects(root: Path, recurse: bool = False, verbose: bool = False) -> list[Path]:
    """Find the legacy project files to migrate.

    Args:
        root: A ``.csproj`` file, or a directory to search.
        recurse: Search all subdirectories of ``root`` instead of only its top level.
        verbose: Print the directory being searched.

    Returns:
        Sorted project file paths. A file ``root`` is returned as the only entry.
    """
    root = Path(root)
    if root.is_file():
        return [root]
    if not root.is_dir():
        return []
    if verbose:
        print(f"Searching {'recursively ' if recurse else ''}through: {root}")
    found = sorted(root.rglob(PROJECT_GLOB) if recurse else root.glob(PROJECT_GLOB))
    print(f"Found {len(found)} projects in {root}")
    return found


@contextmanager
def _stage(name: str, verbose: bool):
    """Print how long the wrapped stage took when ``verbose`` is set."""
    started = time.perf_counter()
    yield
    if verbose:
        print(f"  {name} finished in {(time.perf_counter() - started) * 1000:.1f} ms")


def translate_project(project_path: Path, options: MigrationOptions) -> str:
    """Build the SDK-style content for one legacy project.

    Runs every extraction stage in a fixed order and then the generator. The
    legacy files are only read.

    Args:
        project_path: Legacy ``.csproj`` to translate.
        options: Migration settings.

    Returns:
        The new project file content.

    Raises:
        MigrationError: Any stage failed; the error names the offending file.
    """
    verbose = options.verbose
    limit = options.max_input_bytes

    with _stage("XML load", verbose):
        project = load_legacy_project(project_path, limit)
    output_type = resolve_output_type(project)
    if verbose:
        print(f"  Output type: {output_type}")
    with _stage("Project references", verbose):
        project_refs = extract_project_references(project, verbose)

    packages_config = find_packages_config(project.path, verbose)
    is_test = is_test_project(project, verbose)
    if is_test and packages_config is None:
        print(f"WARNING: {project.path}: test project has no packages.config; "
              "MSTest package references not added", file=sys.stderr)
    with _stage("Package references", verbose):
        package_refs = translate_packages_config(packages_config, is_test, verbose, limit)

    pre_build = extract_build_hook(project, PRE_BUILD, verbose)
    post_build = extract_build_hook(project, POST_BUILD, verbose)

    metadata = None
    if options.make_package:
        if not options.nuspec_path:
            raise ConfigurationError(
                "Generating a package on build requires a nuspec file", project.path
            )
        if verbose:
            print(f"  Importing package metadata from: {options.nuspec_path}")
        with _stage("Nuspec import", verbose):
            metadata = parse_nuspec(options.nuspec_path, limit)

    return generate_sdk_project(
        output_type=output_type,
        project_references=project_refs,
        package_references=package_refs,
        pre_build=pre_build,
        post_build=post_build,
        package_metadata=metadata,
        target_framework=options.target_framework,
    )


def write_project(path: Path, content: str, options: MigrationOptions) -> bool:
    """Persist generated content, or print it in dry-run mode.

    Args:
        path: Project file to overwrite.
        content: Complete new project content (UTF-8 encoded on write).
        options: Migration settings; ``dry_run`` suppresses the write.

    Returns:
        ``True`` if the file was written.

    Raises:
        WriteError: The file could not be written.
    """
    if options.dry_run:
        print("=" * 60)
        print(f"{path} (dry run, not written)")
        print("=" * 60)
        print(content)
        return False
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}", path) from exc
    print(f"  ✓ {path}")
    return True


def migrate_project(project_path: Path, options: MigrationOptions) -> MigrationResult:
    """Migrate a single project, reporting instead of raising on failure.

    Args:
        project_path: Legacy ``.csproj`` to migrate.
        options: Migration settings.

    Returns:
        The MigrationResult; ``error`` is set when any stage failed.
    """
    project_path = Path(project_path)
    result = MigrationResult(project_path=project_path)
    started = time.perf_counter()
    print(f"Beginning migration for {project_path} at: {datetime.now():%Y/%m/%d %H:%M:%S.%f}")
    try:
        result.content = translate_project(project_path, options)
        result.written = write_project(project_path, result.content, options)
    except MigrationError as exc:
        result.error = str(exc)
        print(f"ERROR: {project_path}: {exc}", file=sys.stderr)
    result.elapsed_ms = (time.perf_counter() - started) * 1000
    if result.ok and options.verbose:
        print(f"  Completed in {result.elapsed_ms:.1f} ms")
    return result


def migrate_projects(paths: list[Path], options: MigrationOptions) -> list[MigrationResult]:
    """Migrate a batch of projects one after another.

    A failing project is reported and skipped; the remaining projects are
    still migrated.

    Args:
        paths: Legacy project files.
        options: Migration settings shared by every project.

    Returns:
        One MigrationResult per path, in input order.
    """
    results = [migrate_project(path, options) for path in paths]
    failed = [r for r in results if not r.ok]
    if failed:
        print(f"\n⚠️  {len(failed)} of {len(results)} projects failed:", file=sys.stderr)
        for r in failed:
            print(f"  ✗ {r.project_path}", file=sys.stderr)
    else:
        print(f"\n✅ Migrated {len(results)} projects.")
    return results


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Migrate legacy .csproj files to the SDK-style project format"
    )
    parser.add_argument(
        "path", type=Path, nargs="?", default=Path.cwd(),
        help="Project file or directory to migrate (default: current directory)",
    )
    parser.add_argument("--recurse", "-r", action="store_true",
                        help="Migrate every project below the directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print per-stage details")
    parser.add_argument("--whatif", "--dry-run", "-w", dest="dry_run", action="store_true",
                        help="Print the migrated projects without writing them")
    parser.add_argument("--make-pkg", dest="make_package", action="store_true",
                        help="Generate a NuGet package on build")
    parser.add_argument("--nuspec-path", type=Path, default=None,
                        help="Existing .nuspec file to import package metadata from")
    parser.add_argument("--target-framework", default="net5.0",
                        help="Target framework of the migrated projects (default: net5.0)")
    args = parser.parse_args(argv)
    if args.make_package and args.nuspec_path is None:
        parser.error("--make-pkg requires --nuspec-path")
    return args


def main(argv: Optional[list[str]] = None):
    """CLI entry point. Exits with status 1 if any project failed."""
    args = parse_args(argv)
    options = MigrationOptions(
        verbose=args.verbose,
        dry_run=args.dry_run,
        make_package=args.make_package,
        nuspec_path=args.nuspec_path,
        target_framework=args.target_framework,
    )
    print(f"Executing .NET project migration. Root path: {args.path}")

    paths = find_projects(args.path, args.recurse, args.verbose)
    if not paths:
        print(f"ERROR: No {PROJECT_GLOB} files found at {args.path}", file=sys.stderr)
        sys.exit(1)

    results = migrate_projects(paths, options)
    if not all(r.ok for r in results):
        sys.exit(1)
