"""Legacy-to-SDK translation tables.

Pure constants with no XML parsing, no file I/O, and no internal package
imports. Add new entries here when supporting additional legacy conventions.
"""

# XML namespace used by legacy (pre-SDK) MSBuild project files.
MSBUILD_NS = {"m": "http://schemas.microsoft.com/developer/msbuild/2003"}

# XML namespace used by .nuspec package manifests.
NUSPEC_NS = {"pkg": "http://schemas.microsoft.com/packaging/2011/08/nuspec.xsd"}

PACKAGES_CONFIG = "packages.config"
PROJECT_GLOB = "*.csproj"

SDK_NAME = "Microsoft.NET.Sdk"
DEFAULT_OUTPUT_TYPE = "Library"

# The SDK generates assembly attributes itself; keeping the legacy file compiled
# produces duplicate attribute errors.
GENERATED_ASSEMBLY_INFO = "Properties\\AssemblyInfo.cs"

PRE_BUILD = "PreBuild"
POST_BUILD = "PostBuild"

# Hook kind → legacy target name holding the command.
LEGACY_TARGETS = {
    PRE_BUILD: "BeforeBuild",
    POST_BUILD: "AfterBuild",
}

# Hook kind → legacy property used by the project designer for the same command.
LEGACY_EVENT_PROPERTIES = {
    PRE_BUILD: "PreBuildEvent",
    POST_BUILD: "PostBuildEvent",
}

# Hook kind → (attribute, target) anchoring the new target to the SDK build events.
SDK_HOOK_ANCHORS = {
    PRE_BUILD: ("BeforeTargets", "PreBuildEvent"),
    POST_BUILD: ("AfterTargets", "PostBuildEvent"),
}

# Substrings of <Reference Include> values identifying the legacy MSTest assemblies.
TEST_ASSEMBLY_MARKERS = (
    "VisualStudio.QualityTools",
    "VisualStudio.TestTools",
)

# Package references every migrated test project needs to run under `dotnet test`.
TEST_FRAMEWORK_PACKAGES = (
    ("Microsoft.NET.Test.Sdk", "15.3.0"),
    ("MSTest.TestAdapter", "1.1.18"),
    ("MSTest.TestFramework", "1.1.18"),
)

# .nuspec <metadata> field → SDK project property, in emission order.
NUSPEC_FIELDS = {
    "id": "PackageId",
    "version": "Version",
    "title": "Title",
    "authors": "Authors",
    "description": "Description",
}
