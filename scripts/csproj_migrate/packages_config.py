"""``packages.config`` parsing and translation to ``<PackageReference>`` entries."""

from pathlib import Path
from typing import Optional

from .mapping import PACKAGES_CONFIG, TEST_FRAMEWORK_PACKAGES
from .project_models import PackageReference, PackagesConfig
from .project_parser import read_xml


def find_packages_config(project_path: Path, verbose: bool = False) -> Optional[Path]:
    """Locate the ``packages.config`` next to a project file.

    Args:
        project_path: Path of the legacy ``.csproj``.
        verbose: Print whether the lock file was found.

    Returns:
        Path of the lock file, or ``None`` if the project directory has none.
    """
    candidate = Path(project_path).parent / PACKAGES_CONFIG
    if candidate.is_file():
        if verbose:
            print(f"  Found {PACKAGES_CONFIG}: {candidate}")
        return candidate
    if verbose:
        print(f"  {PACKAGES_CONFIG} not found in: {candidate.parent}")
    return None


def parse_packages_config(path: Path, max_bytes: Optional[int] = None) -> PackagesConfig:
    """Load a ``packages.config`` file."""
    path = Path(path)
    return PackagesConfig(path=path, root=read_xml(path, max_bytes))


def translate_packages_config(
    path: Optional[Path],
    is_test_project: bool,
    verbose: bool = False,
    max_bytes: Optional[int] = None,
) -> list[PackageReference]:
    """Translate a ``packages.config`` into package references.

    Every ``<package>`` with both ``id`` and ``version`` becomes a
    PackageReference, in document order. Entries where either attribute is
    missing or empty are dropped, since an empty value cannot form a valid
    ``<PackageReference>``.

    For test projects the MSTest packages from ``TEST_FRAMEWORK_PACKAGES`` are
    appended. A test package whose id already appears in the lock file is not
    added a second time; the lock file version is kept.

    Args:
        path: Lock file path. ``None`` or empty means the project has no lock
            file, and nothing is returned.
        is_test_project: Append the test framework packages.
        verbose: Print skipped entries and the package count.
        max_bytes: Optional size bound, see :func:`read_xml`.

    Returns:
        Package references for the new ``<ItemGroup>``.
    """
    if not path:
        return []

    config = parse_packages_config(path, max_bytes)
    references = []
    for el in config.root.iter("package"):
        pkg_id = el.get("id")
        version = el.get("version")
        if pkg_id and version:
            references.append(PackageReference(id=pkg_id, version=version))
        elif verbose:
            print(f"  Skipping <package> without id/version in {config.path}")

    if is_test_project:
        seen = {ref.id.lower() for ref in references}
        for pkg_id, version in TEST_FRAMEWORK_PACKAGES:
            if pkg_id.lower() in seen:
                if verbose:
                    print(f"  {pkg_id} already pinned in {PACKAGES_CONFIG}, keeping that version")
                continue
            references.append(PackageReference(id=pkg_id, version=version))

    if verbose:
        print(f"  Packages ported: {len(references)}")
    return references
