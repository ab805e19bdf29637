"""Shared test fixtures for the .csproj migration test suite."""

import textwrap
from pathlib import Path

import pytest

MSBUILD_XMLNS = "http://schemas.microsoft.com/developer/msbuild/2003"
NUSPEC_XMLNS = "http://schemas.microsoft.com/packaging/2011/08/nuspec.xsd"


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture that writes a dedented file below tmp_path and returns its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def tmp_csproj(write_file):
    """Factory fixture that wraps body XML in a namespaced legacy <Project> and writes it."""
    def _write(body: str = "", name: str = "App/App.csproj") -> Path:
        content = (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            f'<Project ToolsVersion="15.0" xmlns="{MSBUILD_XMLNS}">\n'
            f"{textwrap.dedent(body)}\n"
            "</Project>\n"
        )
        return write_file(name, content)
    return _write


@pytest.fixture
def tmp_packages_config(write_file):
    """Factory fixture that writes a packages.config with the given <package> lines."""
    def _write(body: str = "", directory: str = "App") -> Path:
        content = (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            "<packages>\n"
            f"{textwrap.dedent(body)}\n"
            "</packages>\n"
        )
        return write_file(f"{directory}/packages.config", content)
    return _write


@pytest.fixture
def tmp_nuspec(write_file):
    """Factory fixture that writes a namespaced .nuspec with the given metadata fields."""
    def _write(fields: dict, name: str = "App.nuspec") -> Path:
        metadata = "\n".join(f"    <{k}>{v}</{k}>" for k, v in fields.items())
        content = (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            f'<package xmlns="{NUSPEC_XMLNS}">\n'
            "  <metadata>\n"
            f"{metadata}\n"
            "  </metadata>\n"
            "</package>\n"
        )
        return write_file(name, content)
    return _write


@pytest.fixture
def nuspec_fields():
    """A complete set of .nuspec metadata fields."""
    return {
        "id": "Contoso.Utilities",
        "version": "2.1.0",
        "title": "Contoso Utilities",
        "authors": "Contoso",
        "description": "Shared helpers for Contoso services.",
    }


@pytest.fixture
def legacy_test_project(tmp_csproj):
    """A legacy MSTest project with a project reference and both build events."""
    return tmp_csproj("""\
        <PropertyGroup>
            <OutputType>Library</OutputType>
            <RootNamespace>App.Tests</RootNamespace>
        </PropertyGroup>
        <ItemGroup>
            <Reference Include="Microsoft.VisualStudio.QualityTools.UnitTestFramework, Version=10.0.0.0, Culture=neutral" />
            <Reference Include="System" />
        </ItemGroup>
        <ItemGroup>
            <ProjectReference Include="..\\Lib\\Lib.csproj">
                <Name>Lib</Name>
            </ProjectReference>
        </ItemGroup>
        <Target Name="BeforeBuild">
            <Exec Command="echo before" />
        </Target>
        <Target Name="AfterBuild">
            <Exec Command="xcopy /y &quot;$(TargetPath)&quot; ..\\out" />
        </Target>
    """)
