"""lxml parser target feeding the context-stack interpreter.

lxml reports element tags in Clark notation (``{namespace}local``).
The target splits them and forwards start/end/text events so the
interpreter only ever sees resolved ``(namespace, local name)`` pairs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kml2places.activities.convert_kml._interpreter import ContextStackInterpreter


class KmlEventTarget:
    """Parser target for ``lxml.etree.XMLParser(target=...)``."""

    def __init__(self, interpreter: ContextStackInterpreter) -> None:
        self.interpreter = interpreter

    def start(self, tag: str, attrib: Mapping[str, str]) -> None:
        qname = etree.QName(tag)
        self.interpreter.on_element_start(qname.namespace, qname.localname, attrib)

    def end(self, tag: str) -> None:
        qname = etree.QName(tag)
        self.interpreter.on_element_end(qname.namespace, qname.localname)

    def data(self, data: str) -> None:
        self.interpreter.on_text(data)

    def close(self) -> int:
        """Return the number of placemarks emitted for the document."""
        self.interpreter.close()
        return self.interpreter.placemark_count
