"""Tests for context nodes, place records and conversion results."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from kml2places.models import (
    BatchSummary,
    ConversionResult,
    FolderNode,
    PlacemarkNode,
    PlaceRecord,
    SimpleDataNode,
)


class TestContextNodes:
    """Node kinds and defaults."""

    def test_kinds(self) -> None:
        assert FolderNode().kind == "Folder"
        assert PlacemarkNode().kind == "Placemark"
        assert SimpleDataNode().kind == "SimpleData"

    def test_placemark_defaults(self) -> None:
        node = PlacemarkNode(data_kind="Schools")
        assert node.data_kind == "Schools"
        assert node.name is None
        assert node.address is None
        assert node.part_street is None
        assert node.part_number is None

    def test_placemark_str(self) -> None:
        node = PlacemarkNode(data_kind="Schools", name="Atheneum", coordinate="51.036,3.710")
        text = str(node)
        assert "Schools" in text
        assert "'Atheneum'" in text
        assert "51.036,3.710" in text

    def test_folder_nodes_compare_by_identity(self) -> None:
        folder = FolderNode()
        assert folder == folder
        assert folder != FolderNode()


class TestPlaceRecord:
    """Output record model."""

    def test_from_node(self) -> None:
        node = PlacemarkNode(
            data_kind="Schools",
            name="Atheneum",
            description="School",
            coordinate="51.036,3.710",
            address="Voskenslaan 7",
            part_street="Voskenslaan",
            part_number="7",
        )
        record = PlaceRecord.from_node(node)

        assert record.model_dump() == {
            "name": "Atheneum",
            "type": "Schools",
            "description": "School",
            "coordinate": "51.036,3.710",
            "address": "Voskenslaan 7",
        }

    def test_json_keeps_nulls_in_order(self) -> None:
        payload = json.loads(PlaceRecord(address="Korenmarkt 1").model_dump_json())
        assert list(payload) == ["name", "type", "description", "coordinate", "address"]
        assert payload["name"] is None

    def test_frozen(self) -> None:
        record = PlaceRecord(name="a")
        with pytest.raises(ValidationError):
            record.name = "b"  # type: ignore[misc]


class TestResults:
    """Per-file and per-directory outcomes."""

    def test_conversion_result_ok(self) -> None:
        result = ConversionResult(source="a.kml", target="a.json", placemark_count=2)
        assert result.ok
        assert result.to_dict() == {
            "source": "a.kml",
            "target": "a.json",
            "placemark_count": 2,
            "error": {},
        }

    def test_batch_summary_totals(self) -> None:
        summary = BatchSummary(
            input_dir="in",
            output_dir="out",
            results=[
                ConversionResult(source="a.kml", target="a.json", placemark_count=2),
                ConversionResult(source="b.kml", target="b.json", error={"code": "KML_PARSE_FAILED"}),
            ],
        )
        assert summary.processed == 2
        assert summary.placemark_count == 2
        assert [r.source for r in summary.failures] == ["b.kml"]
