"""``.nuspec`` package manifest parsing."""

from pathlib import Path
from typing import Optional

from .errors import MissingFieldError
from .mapping import NUSPEC_FIELDS, NUSPEC_NS
from .project_models import PackageMetadata
from .project_parser import element_text, read_xml


def parse_nuspec(path: Path, max_bytes: Optional[int] = None) -> PackageMetadata:
    """Read the package identity fields from a ``.nuspec`` file.

    All of ``id``, ``version``, ``title``, ``authors`` and ``description`` are
    required. Manifests without the nuspec namespace are accepted as well.

    Args:
        path: Filesystem path to the ``.nuspec`` file.
        max_bytes: Optional size bound, see :func:`read_xml`.

    Returns:
        The imported PackageMetadata.

    Raises:
        NotFoundError: The file does not exist.
        MalformedInputError: The file is not well-formed XML.
        MissingFieldError: One of the five fields is absent or empty.
    """
    path = Path(path)
    root = read_xml(path, max_bytes)
    values = {}
    for field in NUSPEC_FIELDS:
        value = element_text(root, f".//metadata/{field}", NUSPEC_NS)
        if value is None:
            raise MissingFieldError(field, path)
        values[field] = value
    return PackageMetadata(**values)
