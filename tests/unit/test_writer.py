"""Tests for the streaming JSON array writer."""

from __future__ import annotations

import io
import json

import pytest

from kml2places.activities.convert_kml import JsonArrayWriter, JsonOutputError
from kml2places.models.place import PlaceRecord


class _BrokenStream(io.StringIO):
    def write(self, s: str) -> int:
        if s not in ("[", "]"):
            raise OSError("disk full")
        return super().write(s)


class _UnclosableStream(io.StringIO):
    def write(self, s: str) -> int:
        if s == "]":
            raise OSError("stream closed")
        return super().write(s)


class TestJsonArrayWriter:
    """Array framing and record serialisation."""

    def test_empty_array(self) -> None:
        stream = io.StringIO()
        with JsonArrayWriter(stream):
            pass
        assert stream.getvalue() == "[]"

    def test_records_are_comma_separated(self) -> None:
        stream = io.StringIO()
        with JsonArrayWriter(stream) as writer:
            writer.write(PlaceRecord(name="a"))
            writer.write(PlaceRecord(name="b"))

        assert writer.count == 2
        assert [r["name"] for r in json.loads(stream.getvalue())] == ["a", "b"]

    def test_field_order_and_nulls(self) -> None:
        stream = io.StringIO()
        with JsonArrayWriter(stream) as writer:
            writer.write(PlaceRecord(name="Stadhuis", coordinate="51.054,3.725"))

        (record,) = json.loads(stream.getvalue())
        assert list(record) == ["name", "type", "description", "coordinate", "address"]
        assert record == {
            "name": "Stadhuis",
            "type": None,
            "description": None,
            "coordinate": "51.054,3.725",
            "address": None,
        }

    def test_records_written_before_close(self) -> None:
        stream = io.StringIO()
        with JsonArrayWriter(stream) as writer:
            writer.write(PlaceRecord(name="a"))
            assert stream.getvalue().startswith('[{"name":"a"')

    def test_array_closed_when_body_raises(self) -> None:
        stream = io.StringIO()
        with pytest.raises(RuntimeError), JsonArrayWriter(stream) as writer:
            writer.write(PlaceRecord(name="a"))
            raise RuntimeError("parse aborted")

        assert json.loads(stream.getvalue()) == [
            {"name": "a", "type": None, "description": None, "coordinate": None, "address": None}
        ]

    def test_write_failure_is_wrapped(self) -> None:
        stream = _BrokenStream()
        with pytest.raises(JsonOutputError, match="disk full") as excinfo, JsonArrayWriter(
            stream
        ) as writer:
            writer.write(PlaceRecord(name="a"))

        assert excinfo.value.code == "JSON_OUTPUT_FAILED"
        assert stream.getvalue() == "[]"

    def test_non_ascii_text(self) -> None:
        stream = io.StringIO()
        with JsonArrayWriter(stream) as writer:
            writer.write(PlaceRecord(name="Sint-Pietersabdij – café"))

        assert json.loads(stream.getvalue())[0]["name"] == "Sint-Pietersabdij – café"

    def test_close_failure_keeps_body_error(self, caplog: pytest.LogCaptureFixture) -> None:
        stream = _UnclosableStream()
        with pytest.raises(RuntimeError, match="parse aborted"), JsonArrayWriter(stream):
            raise RuntimeError("parse aborted")

        assert "Could not close JSON array after failure: stream closed" in caplog.text

    def test_close_failure_is_wrapped(self) -> None:
        stream = _UnclosableStream()
        with pytest.raises(JsonOutputError, match="stream closed") as excinfo:
            with JsonArrayWriter(stream) as writer:
                writer.write(PlaceRecord(name="a"))

        assert isinstance(excinfo.value.__cause__, OSError)
