"""Test project detection heuristics.

Inspects the legacy assembly references to decide whether a project is an
MSTest project, which drives the extra test framework package references.
"""

from .errors import MissingAttributeError
from .mapping import TEST_ASSEMBLY_MARKERS
from .project_models import LegacyProject
from .project_parser import find_elements


def is_test_project(project: LegacyProject, verbose: bool = False) -> bool:
    """Check whether the project references the legacy MSTest assemblies.

    Detection looks for ``VisualStudio.QualityTools`` or ``VisualStudio.TestTools``
    in any ``<Reference Include="...">`` value.

    Args:
        project: The legacy project to classify.
        verbose: Print the classification result.

    Returns:
        ``True`` if a test tooling assembly is referenced.

    Raises:
        MissingAttributeError: A ``<Reference>`` element has no ``Include`` attribute.
    """
    is_test = False
    for el in find_elements(project.root, ".//ItemGroup/Reference"):
        include = el.get("Include")
        if include is None:
            raise MissingAttributeError(
                f"<Reference> without Include attribute in {project.path}", project.path
            )
        if any(marker in include for marker in TEST_ASSEMBLY_MARKERS):
            is_test = True
            break
    if verbose:
        print("  Project is in test format" if is_test else "  Project is not in test format")
    return is_test
