"""SDK-style project file generator.

Produces the content of the migrated ``.csproj``. All functions take values
extracted from the legacy project and return strings; nothing here reads or
writes files.
"""

from typing import Optional
from xml.sax.saxutils import escape

from .mapping import (
    DEFAULT_OUTPUT_TYPE,
    GENERATED_ASSEMBLY_INFO,
    NUSPEC_FIELDS,
    SDK_HOOK_ANCHORS,
    SDK_NAME,
)
from .project_models import BuildHook, PackageMetadata, PackageReference, ProjectReference

_ATTR_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


def _attr(value: str) -> str:
    """Escape a value for use inside a double-quoted XML attribute."""
    return escape(value, _ATTR_ENTITIES)


def _hook_lines(hook: BuildHook) -> list[str]:
    """Render a BuildHook as an SDK ``<Target>`` running a single ``<Exec>``."""
    anchor_attr, anchor_target = SDK_HOOK_ANCHORS[hook.kind]
    return [
        f'\t<Target Name="{hook.kind}" {anchor_attr}="{anchor_target}">',
        f'\t\t<Exec Command="{_attr(hook.command)}" />',
        "\t</Target>",
    ]


def generate_sdk_project(
    output_type: str = DEFAULT_OUTPUT_TYPE,
    project_references: Optional[list[ProjectReference]] = None,
    package_references: Optional[list[PackageReference]] = None,
    pre_build: Optional[BuildHook] = None,
    post_build: Optional[BuildHook] = None,
    package_metadata: Optional[PackageMetadata] = None,
    target_framework: str = "net5.0",
) -> str:
    """Generate the content of an SDK-style ``.csproj``.

    Sections are always emitted in this order:
        1. ``<Project Sdk>`` header and ``<PropertyGroup>`` with the target framework
        2. ``<OutputType>``
        3. package metadata (only when ``package_metadata`` is given)
        4. project references
        5. package references
        6. removal of the legacy ``AssemblyInfo.cs``
        7. pre-build target
        8. post-build target
        9. closing ``</Project>``

    Item groups with no entries are left out. Attribute values and element
    text are XML-escaped, so hook commands containing ``"``, ``<`` or ``&``
    produce a well-formed file.

    Args:
        output_type: Value for ``<OutputType>``.
        project_references: Project references in legacy document order.
        package_references: Package references translated from ``packages.config``.
        pre_build: Pre-build hook, if the legacy project had one.
        post_build: Post-build hook, if the legacy project had one.
        package_metadata: Package identity to embed, enabling ``GeneratePackageOnBuild``.
        target_framework: Value for ``<TargetFramework>``.

    Returns:
        Complete project file content as a string.
    """
    lines = []

    # ── Header ──
    lines.append(f'<Project Sdk="{SDK_NAME}">')
    lines.append("\t<PropertyGroup>")
    lines.append(f"\t\t<TargetFramework>{escape(target_framework)}</TargetFramework>")
    lines.append(f"\t\t<OutputType>{escape(output_type)}</OutputType>")

    # ── Package metadata ──
    if package_metadata is not None:
        lines.append("\t\t<GeneratePackageOnBuild>true</GeneratePackageOnBuild>")
        for field, prop in NUSPEC_FIELDS.items():
            value = getattr(package_metadata, field)
            lines.append(f"\t\t<{prop}>{escape(value)}</{prop}>")
    lines.append("\t</PropertyGroup>")

    # ── Project references ──
    if project_references:
        lines.append("\t<ItemGroup>")
        for ref in project_references:
            lines.append(f'\t\t<ProjectReference Include="{_attr(ref.path)}" />')
        lines.append("\t</ItemGroup>")

    # ── Package references ──
    if package_references:
        lines.append("\t<ItemGroup>")
        for ref in package_references:
            lines.append(
                f'\t\t<PackageReference Include="{_attr(ref.id)}" Version="{_attr(ref.version)}" />'
            )
        lines.append("\t</ItemGroup>")

    # ── Generated AssemblyInfo ──
    lines.append("\t<ItemGroup>")
    lines.append(f'\t\t<Compile Remove="{_attr(GENERATED_ASSEMBLY_INFO)}" />')
    lines.append("\t</ItemGroup>")

    # ── Build events ──
    if pre_build is not None:
        lines.extend(_hook_lines(pre_build))
    if post_build is not None:
        lines.extend(_hook_lines(post_build))

    lines.append("</Project>")
    lines.append("")
    return "\n".join(lines)
