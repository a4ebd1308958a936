"""Context nodes held on the interpreter stack.

One node exists per open ``Folder``, ``Placemark`` or ``SimpleData``
element. The node kinds form a closed union; the interpreter dispatches
on the concrete class instead of overriding setters.

- **FolderNode**: carries nothing; a Folder's ``name`` becomes the
  interpreter's current type.
- **PlacemarkNode**: accumulates the fields of one output record.
- **SimpleDataNode**: remembers the ``name`` attribute until the value
  text is complete.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class FolderNode:
    """Marker for an open ``Folder`` element."""

    kind = "Folder"


@dataclass(slots=True)
class PlacemarkNode:
    """An open ``Placemark`` being filled in.

    Attributes:
        data_kind: Folder-derived type current when the Placemark opened.
        name: Placemark name (``<name>`` text or a mapped SimpleData key).
        description: ``<description>`` text, verbatim.
        coordinate: ``"lat,lon"`` for single-point geometry, else ``None``.
        address: Direct address or ``"<street> <number>"``.
        part_street: Street part seen so far.
        part_number: House number part seen so far.
    """

    kind = "Placemark"

    data_kind: str | None = None
    name: str | None = None
    description: str | None = None
    coordinate: str | None = None
    address: str | None = None
    part_street: str | None = None
    part_number: str | None = None

    def __str__(self) -> str:
        return f"({self.data_kind!s:>15}) {self.name!r:<40} @({self.coordinate!s:>35})// {self.address}"


@dataclass(slots=True)
class SimpleDataNode:
    """An open ``SimpleData`` element keyed by its ``name`` attribute."""

    kind = "SimpleData"

    name: str | None = None


ContextNode = FolderNode | PlacemarkNode | SimpleDataNode
