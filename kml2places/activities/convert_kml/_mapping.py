"""SimpleData key/value mapping onto Placemark fields.

The source data sets (Ghent open data exports) name the same concept in
many ways. Keys are matched in rule order and the first matching rule
wins:

- name keys:    ``Naam`` (any case), ``NAAM1``, ``AFDELING``, ``Code``,
  ``ORGANISATI``, ``NAAMGZC``
- address keys: ``Ligging``, ``LOCATIE``, ``Plaats``, ``ADRES``
- street key:   ``Straat`` (any case)
- number keys:  ``NR``, ``HUISNR``, ``huisnummer``

Street and number assemble the address as ``"<street> <number>"`` each
time either arrives, overwriting any earlier direct address.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kml2places.models.context import PlacemarkNode

if TYPE_CHECKING:
    from kml2places.models.context import ContextNode

NAME_KEYS = frozenset({"NAAM1", "AFDELING", "Code", "ORGANISATI", "NAAMGZC"})
NAME_KEY_ANY_CASE = "naam"
ADDRESS_KEYS = frozenset({"Ligging", "LOCATIE", "Plaats", "ADRES"})
STREET_KEY_ANY_CASE = "straat"
NUMBER_KEYS = frozenset({"NR", "HUISNR", "huisnummer"})

ADDRESS_PART_PLACEHOLDER = "null"
"""Rendered for a street or number part that has not been seen yet."""


def ingest_keyvalue(node: ContextNode, key: str | None, value: str | None) -> None:
    """Apply one SimpleData pair to ``node``.

    No-op when key or value is empty, when the key is not recognised,
    or when ``node`` is not a Placemark.
    """
    if not key or not value:
        return
    if not isinstance(node, PlacemarkNode):
        return

    lowered = key.casefold()
    if lowered == NAME_KEY_ANY_CASE or key in NAME_KEYS:
        node.name = value
    elif key in ADDRESS_KEYS:
        node.address = value
    elif lowered == STREET_KEY_ANY_CASE:
        node.part_street = value
        node.address = _join_address(node)
    elif key in NUMBER_KEYS:
        node.part_number = value
        node.address = _join_address(node)


def _join_address(node: PlacemarkNode) -> str:
    street = node.part_street if node.part_street is not None else ADDRESS_PART_PLACEHOLDER
    number = node.part_number if node.part_number is not None else ADDRESS_PART_PLACEHOLDER
    return f"{street} {number}"
