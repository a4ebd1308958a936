"""Pydantic model for one output place record.

Each completed ``Placemark`` becomes exactly one ``PlaceRecord`` and one
JSON object in the output array. The field order below is the order of
the keys in the JSON output; absent values serialise as ``null``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from kml2places.models.context import PlacemarkNode


class PlaceRecord(BaseModel):
    """A flat place record.

    Attributes:
        name: Placemark name.
        type: Name of the enclosing Folder at the time the Placemark opened.
        description: Placemark description text.
        coordinate: ``"lat,lon"`` or ``None`` for non-point geometry.
        address: Street address, if any was mapped from SimpleData.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    type: str | None = None
    description: str | None = None
    coordinate: str | None = None
    address: str | None = None

    @classmethod
    def from_node(cls, node: PlacemarkNode) -> PlaceRecord:
        """Build a record from a closed Placemark context node."""
        return cls(
            name=node.name,
            type=node.data_kind,
            description=node.description,
            coordinate=node.coordinate,
            address=node.address,
        )
