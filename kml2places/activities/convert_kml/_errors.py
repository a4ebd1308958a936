"""Exceptions raised while converting one KML document (public API, re-exported from __init__)."""

from __future__ import annotations

from kml2places.core.exceptions import PermanentError


class KmlParseError(PermanentError):
    """Raised when a KML file cannot be read or is not well-formed XML."""

    default_stage = "convert_kml"
    default_code = "KML_PARSE_FAILED"


class ContextStackError(PermanentError):
    """Raised when a closing element does not match the node on top of the stack.

    Signals unbalanced input or an interpreter defect; the document
    cannot be converted further.
    """

    default_stage = "convert_kml"
    default_code = "CONTEXT_STACK_MISMATCH"


class JsonOutputError(PermanentError):
    """Raised when a place record cannot be written to the JSON output."""

    default_stage = "convert_kml"
    default_code = "JSON_OUTPUT_FAILED"
