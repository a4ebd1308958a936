"""Input discovery and output naming for directory conversion.

Output files live flat in the output directory and are named after the
input's base name: ``IN-kml/scholen.kml`` → ``OUT-json/scholen.json``.
"""

from __future__ import annotations

from pathlib import Path

from kml2places.core.constants import JSON_SUFFIX, KML_SUFFIX
from kml2places.core.exceptions import ValidationError


class DirectoryValidationError(ValidationError):
    """Raised when an input or output directory does not exist."""

    default_stage = "batch"
    default_code = "DIRECTORY_INVALID"


def require_directory(path: Path | str, role: str) -> Path:
    """Return ``path`` as a ``Path`` if it is an existing directory.

    Raises:
        DirectoryValidationError: If ``path`` is missing or not a directory.
    """
    directory = Path(path)
    if not directory.is_dir():
        msg = f"{role} directory not valid: {directory.resolve()}"
        raise DirectoryValidationError(msg, source=str(directory))
    return directory


def list_kml_files(input_dir: Path) -> list[Path]:
    """List ``*.kml`` files directly inside ``input_dir``, sorted by name."""
    return sorted(
        p for p in input_dir.iterdir() if p.is_file() and p.name.endswith(KML_SUFFIX)
    )


def output_path_for(kml_path: Path, output_dir: Path) -> Path:
    """Return the JSON output path for ``kml_path`` inside ``output_dir``."""
    return output_dir / f"{kml_path.stem}{JSON_SUFFIX}"
