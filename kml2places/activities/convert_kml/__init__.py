"""KML → JSON conversion activity.

Converts one KML file into a JSON array of place records. The document
is streamed: lxml's feed parser drives the context-stack interpreter
through a parser target, and every completed Placemark is written to
the output as soon as its closing tag is seen.

The conversion is split into focused stages:
- **_events**: lxml parser target splitting ``{namespace}local`` tags
- **_interpreter**: context-stack interpreter (Folder / Placemark / SimpleData)
- **_mapping**: SimpleData key → Placemark field heuristics
- **_coordinates**: ``lon,lat,alt`` → ``lat,lon`` for single points
- **_writer**: streaming JSON array output

Failure handling:
- Unreadable or malformed XML raises ``KmlParseError``
- Broken element nesting raises ``ContextStackError``
- Unknown keys, missing text and non-point geometry become ``null``
- The output array is closed in every case
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from kml2places.activities.convert_kml._coordinates import parse_coordinate
from kml2places.activities.convert_kml._errors import (
    ContextStackError,
    JsonOutputError,
    KmlParseError,
)
from kml2places.activities.convert_kml._events import KmlEventTarget
from kml2places.activities.convert_kml._interpreter import ContextStackInterpreter
from kml2places.activities.convert_kml._mapping import ingest_keyvalue
from kml2places.activities.convert_kml._writer import JsonArrayWriter
from kml2places.core.constants import DEFAULT_READ_CHUNK_SIZE, KML_NAMESPACE
from kml2places.models.result import ConversionResult

logger = logging.getLogger("kml2places.activities.convert_kml")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "ContextStackError",
    "ContextStackInterpreter",
    "JsonArrayWriter",
    "JsonOutputError",
    "KmlEventTarget",
    "KmlParseError",
    "convert_kml_file",
    "ingest_keyvalue",
    "parse_coordinate",
]


def convert_kml_file(
    kml_path: Path | str,
    json_path: Path | str,
    *,
    namespace: str = KML_NAMESPACE,
    chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
) -> ConversionResult:
    """Convert one KML file into a JSON array file.

    Any existing file at ``json_path`` is removed first. The output
    array is closed even when conversion fails, so ``json_path`` always
    holds well-formed JSON afterwards.

    Args:
        kml_path: KML input file.
        json_path: JSON output file (replaced).
        namespace: KML namespace URI to interpret.
        chunk_size: Bytes fed to the XML parser per call.

    Returns:
        A ``ConversionResult`` with the number of placemarks written.

    Raises:
        KmlParseError: If the input cannot be read or is not well-formed XML.
        ContextStackError: If element nesting breaks the context stack.
        JsonOutputError: If a record cannot be written.
    """
    kml_path = Path(kml_path)
    json_path = Path(json_path)

    logger.info("Converting KML file | source=%s", kml_path)
    if json_path.exists():
        logger.info("Replacing output | target=%s", json_path)
    json_path.unlink(missing_ok=True)

    with json_path.open("w", encoding="utf-8") as stream, JsonArrayWriter(stream) as writer:
        interpreter = ContextStackInterpreter(writer.write, namespace=namespace)
        try:
            _feed_document(kml_path, KmlEventTarget(interpreter), chunk_size)
        except (ContextStackError, JsonOutputError) as exc:
            exc.source = exc.source or str(kml_path)
            raise

    logger.info(
        "Converted %d placemark(s) | source=%s | target=%s",
        writer.count,
        kml_path.name,
        json_path,
    )
    return ConversionResult(
        source=str(kml_path),
        target=str(json_path),
        placemark_count=writer.count,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _feed_document(kml_path: Path, target: KmlEventTarget, chunk_size: int) -> None:
    """Stream ``kml_path`` through an lxml parser bound to ``target``."""
    parser = etree.XMLParser(target=target, resolve_entities=False, no_network=True)
    try:
        with kml_path.open("rb") as source:
            for chunk in iter(lambda: source.read(chunk_size), b""):
                parser.feed(chunk)
        parser.close()
    except OSError as exc:
        msg = f"Cannot read KML file: {exc}"
        raise KmlParseError(msg, source=str(kml_path)) from exc
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg, source=str(kml_path)) from exc
