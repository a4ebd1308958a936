"""Data models.

- ContextNode: FolderNode / PlacemarkNode / SimpleDataNode stack entries
- PlaceRecord: One output JSON object per Placemark
- ConversionResult / BatchSummary: Per-file and per-directory outcomes
"""

from kml2places.models.context import ContextNode, FolderNode, PlacemarkNode, SimpleDataNode
from kml2places.models.place import PlaceRecord
from kml2places.models.result import BatchSummary, ConversionResult

__all__ = [
    "BatchSummary",
    "ContextNode",
    "ConversionResult",
    "FolderNode",
    "PlaceRecord",
    "PlacemarkNode",
    "SimpleDataNode",
]
