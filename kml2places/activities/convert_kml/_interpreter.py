"""Context-stack interpreter for KML element events.

Consumes start/end/text events for one document and emits one
``PlaceRecord`` per closed ``Placemark``:

- ``Folder`` pushes the interpreter's single FolderNode; a Folder's
  ``<name>`` becomes ``current_type`` and is copied onto every Placemark
  opened afterwards.
- ``Placemark`` pushes a PlacemarkNode; on close it is emitted.
- ``SimpleData`` pushes a SimpleDataNode; on close its ``name`` attribute
  and text are mapped onto the parent Placemark.
- ``name``, ``description`` and ``coordinates`` only capture text for
  the node on top of the stack.

Closing a Placemark, SimpleData or Folder whose node is not on top of
the stack raises ``ContextStackError``. Everything else (unknown keys,
missing text, non-point geometry) degrades to ``None``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from kml2places.activities.convert_kml._coordinates import parse_coordinate
from kml2places.activities.convert_kml._errors import ContextStackError
from kml2places.activities.convert_kml._mapping import ingest_keyvalue
from kml2places.core.constants import (
    COORDINATES_ELEMENT,
    DESCRIPTION_ELEMENT,
    FOLDER_ELEMENT,
    KML_NAMESPACE,
    NAME_ATTRIBUTE,
    NAME_ELEMENT,
    PLACEMARK_ELEMENT,
    SIMPLE_DATA_ELEMENT,
)
from kml2places.models.context import FolderNode, PlacemarkNode, SimpleDataNode
from kml2places.models.place import PlaceRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from kml2places.models.context import ContextNode

logger = logging.getLogger("kml2places.activities.convert_kml")

_TEXT_ELEMENTS = frozenset({NAME_ELEMENT, DESCRIPTION_ELEMENT, COORDINATES_ELEMENT})

NodeT = TypeVar("NodeT", FolderNode, PlacemarkNode, SimpleDataNode)


class ContextStackInterpreter:
    """Stack-based interpreter for one KML document.

    Args:
        emit: Called with each completed ``PlaceRecord``, in document order.
        namespace: Only elements in this namespace are interpreted.

    Attributes:
        current_type: Name of the most recently named Folder, or ``None``.
        placemark_count: Number of records emitted so far.
    """

    def __init__(
        self,
        emit: Callable[[PlaceRecord], None],
        *,
        namespace: str = KML_NAMESPACE,
    ) -> None:
        self._emit = emit
        self._namespace = namespace
        self._stack: list[ContextNode] = []
        self._chars: list[str] | None = None
        self._folder = FolderNode()
        self.current_type: str | None = None
        self.placemark_count = 0

    @property
    def depth(self) -> int:
        """Number of open context nodes."""
        return len(self._stack)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_element_start(
        self,
        namespace: str | None,
        tag: str,
        attributes: Mapping[str, str] | None = None,
    ) -> None:
        """Handle an opening element."""
        if namespace != self._namespace:
            return

        if tag == SIMPLE_DATA_ELEMENT:
            key = (attributes or {}).get(NAME_ATTRIBUTE)
            self._stack.append(SimpleDataNode(name=key))
            self._arm_text()
        elif tag == PLACEMARK_ELEMENT:
            self._stack.append(PlacemarkNode(data_kind=self.current_type))
        elif tag == FOLDER_ELEMENT:
            self._stack.append(self._folder)
        elif tag in _TEXT_ELEMENTS:
            self._arm_text()

    def on_text(self, fragment: str) -> None:
        """Handle character data; kept only while text capture is armed."""
        if self._chars is not None:
            self._chars.append(fragment)

    def on_element_end(self, namespace: str | None, tag: str) -> None:
        """Handle a closing element.

        Raises:
            ContextStackError: If the node on top of the stack does not
                belong to the closing ``Placemark``, ``SimpleData`` or
                ``Folder`` element.
        """
        if namespace != self._namespace:
            return
        text = self._take_text()

        if tag == SIMPLE_DATA_ELEMENT:
            data = self._pop(SimpleDataNode, tag)
            if self._stack:
                ingest_keyvalue(self._stack[-1], data.name, text)
            else:
                logger.debug("SimpleData %r outside any Placemark ignored", data.name)
        elif tag == PLACEMARK_ELEMENT:
            placemark = self._pop(PlacemarkNode, tag)
            self._emit_placemark(placemark)
        elif tag == FOLDER_ELEMENT:
            folder = self._pop(FolderNode, tag)
            if folder is not self._folder:
                raise ContextStackError(f"wrong context node for {tag}: {folder!r}")
        elif tag == DESCRIPTION_ELEMENT:
            top = self._top()
            if isinstance(top, PlacemarkNode):
                top.description = text
        elif tag == COORDINATES_ELEMENT:
            top = self._top()
            if isinstance(top, PlacemarkNode):
                top.coordinate = parse_coordinate(text)
                if top.coordinate is None and text:
                    logger.debug("Dropped non-point coordinates for %r", top.name)
        elif tag == NAME_ELEMENT and text is not None:
            self._set_name(self._top(), text)

    def close(self) -> None:
        """Finish the document, warning about elements left open."""
        if self._stack:
            logger.warning(
                "Document ended with %d open context node(s): %s",
                len(self._stack),
                ", ".join(node.kind for node in self._stack),
            )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _arm_text(self) -> None:
        # Text without an enclosing context node has nothing to attach to.
        if self._stack:
            self._chars = []

    def _take_text(self) -> str | None:
        if self._chars is None:
            return None
        text = "".join(self._chars)
        self._chars = None
        return text

    def _top(self) -> ContextNode | None:
        return self._stack[-1] if self._stack else None

    def _pop(self, expected: type[NodeT], tag: str) -> NodeT:
        if not self._stack:
            raise ContextStackError(f"closing </{tag}> with no open context node")
        node = self._stack.pop()
        if not isinstance(node, expected):
            raise ContextStackError(f"wrong context node for {tag}: found {node.kind}")
        return node

    def _set_name(self, node: ContextNode | None, name: str) -> None:
        if isinstance(node, FolderNode):
            self.current_type = name
        elif isinstance(node, PlacemarkNode | SimpleDataNode):
            node.name = name

    def _emit_placemark(self, placemark: PlacemarkNode) -> None:
        logger.debug("Placemark %s", placemark)
        self._emit(PlaceRecord.from_node(placemark))
        self.placemark_count += 1
