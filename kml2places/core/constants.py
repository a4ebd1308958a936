"""Shared converter constants, the single source of truth.

Element and attribute names the interpreter reacts to, the KML namespace,
and the file naming conventions of the batch runner.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# KML vocabulary
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://earth.google.com/kml/2.2"
"""Namespace the interpreter listens to; elements outside it are ignored."""

FOLDER_ELEMENT = "Folder"
PLACEMARK_ELEMENT = "Placemark"
SIMPLE_DATA_ELEMENT = "SimpleData"
NAME_ELEMENT = "name"
DESCRIPTION_ELEMENT = "description"
COORDINATES_ELEMENT = "coordinates"

NAME_ATTRIBUTE = "name"

# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

KML_SUFFIX = ".kml"
JSON_SUFFIX = ".json"

DEFAULT_INPUT_DIR = "../data/IN-kml"
DEFAULT_OUTPUT_DIR = "../data/OUT-json"

DEFAULT_READ_CHUNK_SIZE = 64 * 1024
"""Bytes handed to the XML parser per feed call."""
