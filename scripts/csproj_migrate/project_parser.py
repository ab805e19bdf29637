"""Legacy project parsing and XML helpers.

Handles all interaction with legacy ``.csproj`` files: loading the XML,
resolving the output type, and extracting project references and build
hooks. Every function here only reads the tree.
"""

import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .errors import InputTooLargeError, MalformedInputError, MigrationError, NotFoundError
from .mapping import (
    DEFAULT_OUTPUT_TYPE,
    LEGACY_EVENT_PROPERTIES,
    LEGACY_TARGETS,
    MSBUILD_NS,
    PRE_BUILD,
)
from .project_models import BuildHook, LegacyProject, ProjectReference


def _qualify(path: str, prefix: str) -> str:
    """Prefix every tag step of an ElementPath expression with a namespace prefix.

    ``.//ItemGroup/Reference`` becomes ``.//m:ItemGroup/m:Reference``.
    """
    steps = []
    for step in path.split("/"):
        if step and step not in (".", ".."):
            step = f"{prefix}:{step}"
        steps.append(step)
    return "/".join(steps)


def find_elements(el, path, ns=MSBUILD_NS) -> list:
    """Find all elements matching ``path``, with and without the namespace.

    Legacy project files always declare the MSBuild namespace, but hand-written
    fixtures and some generators omit it.

    Args:
        el: Element to search from.
        path: ElementPath expression written without namespace prefixes.
        ns: Namespace mapping with a single prefix.

    Returns:
        Matching elements in document order.
    """
    prefix = next(iter(ns))
    return list(el.findall(_qualify(path, prefix), ns)) + list(el.findall(path))


def _find(el, path, ns=MSBUILD_NS):
    """Return the first element matching ``path``, or ``None``."""
    found = find_elements(el, path, ns)
    return found[0] if found else None


def element_text(el, path, ns=MSBUILD_NS) -> Optional[str]:
    """Extract the stripped text of the first element matching ``path``.

    Returns:
        Stripped text content, or ``None`` if the element doesn't exist or is empty.
    """
    child = _find(el, path, ns)
    if child is not None and child.text and child.text.strip():
        return child.text.strip()
    return None


def read_xml(path: Path, max_bytes: Optional[int] = None) -> ET.Element:
    """Parse an XML file and return its root element.

    Args:
        path: File to read.
        max_bytes: Reject files larger than this many bytes. ``None`` disables the check.

    Returns:
        The root element.

    Raises:
        NotFoundError: ``path`` is not an existing file.
        InputTooLargeError: The file is larger than ``max_bytes``.
        MalformedInputError: The content is not well-formed XML.
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"File not found: {path}", path)
    if max_bytes is not None:
        size = path.stat().st_size
        if size > max_bytes:
            raise InputTooLargeError(
                f"{path} is {size} bytes, larger than the {max_bytes} byte limit", path
            )
    try:
        return ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise MalformedInputError(f"Malformed XML in {path}: {exc}", path) from exc
    except OSError as exc:
        raise MigrationError(f"Cannot read {path}: {exc}", path) from exc


def load_legacy_project(path: Path, max_bytes: Optional[int] = None) -> LegacyProject:
    """Load a legacy ``.csproj`` file.

    Args:
        path: Filesystem path to the project file.
        max_bytes: Optional size bound, see :func:`read_xml`.

    Returns:
        The parsed project.
    """
    path = Path(path)
    return LegacyProject(path=path, root=read_xml(path, max_bytes))


def _last_unconditional_text(root, tag: str) -> Optional[str]:
    """Return the text of the last ``PropertyGroup/<tag>`` MSBuild would keep.

    MSBuild evaluates properties top to bottom, so the last definition wins.
    Definitions guarded by a ``Condition`` on the element or its group depend
    on the build configuration; they are only used when no unconditional
    definition exists.
    """
    unconditional = []
    conditional = []
    for group in find_elements(root, ".//PropertyGroup"):
        for el in find_elements(group, tag):
            if not (el.text and el.text.strip()):
                continue
            if group.get("Condition") or el.get("Condition"):
                conditional.append(el.text.strip())
            else:
                unconditional.append(el.text.strip())
    values = unconditional or conditional
    return values[-1] if values else None


def find_output_type(project: LegacyProject) -> Optional[str]:
    """Return the declared ``<OutputType>``, or ``None`` when the project has none."""
    return _last_unconditional_text(project.root, "OutputType")


def resolve_output_type(project: LegacyProject, default: str = DEFAULT_OUTPUT_TYPE) -> str:
    """Return the declared ``<OutputType>``, falling back to ``default`` (``Library``)."""
    output_type = find_output_type(project)
    return output_type if output_type is not None else default


def extract_project_references(project: LegacyProject, verbose: bool = False) -> list[ProjectReference]:
    """Collect ``<ProjectReference>`` entries in document order.

    Entries without an ``Include`` attribute, or with an empty one, are
    dropped; they are reported when ``verbose`` is set but are not an error.

    Args:
        project: The legacy project.
        verbose: Print skipped entries.

    Returns:
        One ProjectReference per usable entry.
    """
    references = []
    for el in find_elements(project.root, ".//ItemGroup/ProjectReference"):
        include = el.get("Include")
        if include:
            references.append(ProjectReference(path=include))
        elif verbose:
            print(f"  Skipping <ProjectReference> without Include in {project.path}")
    if verbose:
        print(f"  Referenced projects: {len(references)}")
    return references


def _target_command(target) -> Optional[str]:
    """Return the ``<Exec>`` commands of a target joined by newlines, or its own text."""
    commands = [
        exec_el.get("Command") for exec_el in find_elements(target, "Exec")
        if exec_el.get("Command")
    ]
    if commands:
        return "\n".join(commands)
    if target.text and target.text.strip():
        return target.text.strip()
    return None


def extract_build_hook(project: LegacyProject, kind: str, verbose: bool = False) -> Optional[BuildHook]:
    """Extract the pre- or post-build command of a legacy project.

    Two legacy sources hold the command: the ``BeforeBuild`` / ``AfterBuild``
    target (its ``<Exec>`` commands, or the target's own text when it has no
    ``<Exec>``) and the ``PreBuildEvent`` / ``PostBuildEvent`` property written
    by the project designer. When a project has both, they are joined in the
    order MSBuild runs them: ``BeforeBuild`` before ``PreBuildEvent``, and
    ``PostBuildEvent`` before ``AfterBuild``. The last definition of the target
    or property is used.

    A target that exists but runs no command (e.g. only ``<Copy>`` tasks)
    cannot be expressed as a command and is reported as a warning on stderr.

    Args:
        project: The legacy project.
        kind: ``PreBuild`` or ``PostBuild``.
        verbose: Print where the hook was found.

    Returns:
        A BuildHook, or ``None`` if the project defines no command for ``kind``.
    """
    target_name = LEGACY_TARGETS[kind]
    targets = find_elements(project.root, f".//Target[@Name='{target_name}']")
    target_command = None
    if targets:
        target_command = _target_command(targets[-1])
        if target_command is None:
            print(f"WARNING: {project.path}: {target_name} target has no Exec command; not migrated",
                  file=sys.stderr)
    event_command = _last_unconditional_text(project.root, LEGACY_EVENT_PROPERTIES[kind])

    if kind == PRE_BUILD:
        ordered = [target_command, event_command]
    else:
        ordered = [event_command, target_command]
    commands = [c for c in ordered if c]

    if not commands:
        if verbose:
            print(f"  No {kind} command found.")
        return None
    command = "\n".join(commands)
    if verbose:
        print(f"  Found {kind} event: {command}")
    return BuildHook(kind=kind, command=command)
