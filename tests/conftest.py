"""Shared pytest fixtures for the kml2places test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from kml2places.activities.convert_kml import ContextStackInterpreter
from kml2places.core.constants import KML_NAMESPACE
from kml2places.models.place import PlaceRecord

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"

OPENGIS_NAMESPACE = "http://www.opengis.net/kml/2.2"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def schools_kml(data_dir: Path) -> Path:
    """KML with a Placemark before a "Schools" Folder holding two SimpleData Placemarks."""
    return data_dir / "01_schools_folder.kml"


@pytest.fixture()
def nested_folders_kml(data_dir: Path) -> Path:
    """KML with nested Folders, a Polygon Placemark and a CDATA description."""
    return data_dir / "02_nested_folders_shapes.kml"


@pytest.fixture()
def opengis_kml(data_dir: Path) -> Path:
    """KML using the OGC namespace instead of the Google Earth one."""
    return data_dir / "03_opengis_namespace.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def unclosed_tags_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose Placemark is never closed."""
    return edge_cases_dir / "12_malformed_unclosed_tags.kml"


@pytest.fixture()
def empty_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML with no Placemarks."""
    return edge_cases_dir / "13_empty_no_features.kml"


# ---------------------------------------------------------------------------
# Interpreter helpers
# ---------------------------------------------------------------------------


class EventScript:
    """Drive an interpreter with terse start/text/end calls in the KML namespace."""

    def __init__(
        self, interpreter: ContextStackInterpreter, namespace: str = KML_NAMESPACE
    ) -> None:
        self.interpreter = interpreter
        self.namespace = namespace

    def start(self, tag: str, **attributes: str) -> EventScript:
        self.interpreter.on_element_start(self.namespace, tag, attributes)
        return self

    def text(self, fragment: str) -> EventScript:
        self.interpreter.on_text(fragment)
        return self

    def end(self, tag: str) -> EventScript:
        self.interpreter.on_element_end(self.namespace, tag)
        return self

    def leaf(self, tag: str, text: str) -> EventScript:
        return self.start(tag).text(text).end(tag)

    def simple_data(self, key: str, value: str) -> EventScript:
        return self.start("SimpleData", name=key).text(value).end("SimpleData")


@pytest.fixture()
def records() -> list[PlaceRecord]:
    """Sink collecting emitted place records."""
    return []


@pytest.fixture()
def interpreter(records: list[PlaceRecord]) -> ContextStackInterpreter:
    """Fresh interpreter emitting into ``records``."""
    return ContextStackInterpreter(records.append)


@pytest.fixture()
def script(interpreter: ContextStackInterpreter) -> EventScript:
    """Event script bound to ``interpreter``."""
    return EventScript(interpreter)
