"""Streaming JSON array writer.

Writes ``[``, then one compact object per record as soon as it is
produced, then ``]``. The closing bracket is written on exit even when
the conversion fails part-way, so a partially converted file is still a
well-formed JSON array.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from pydantic_core import PydanticSerializationError

from kml2places.activities.convert_kml._errors import JsonOutputError

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO

    from kml2places.models.place import PlaceRecord

logger = logging.getLogger("kml2places.activities.convert_kml")


class JsonArrayWriter:
    """Context manager writing ``PlaceRecord`` objects as a JSON array."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._count = 0

    @property
    def count(self) -> int:
        """Number of records written."""
        return self._count

    def __enter__(self) -> Self:
        self._stream.write("[")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self._stream.write("]")
            self._stream.flush()
        except OSError as close_exc:
            if exc is not None:
                # Keep the error that aborted the body.
                logger.error("Could not close JSON array after failure: %s", close_exc)
                return
            msg = f"error while closing json output: {close_exc}"
            raise JsonOutputError(msg) from close_exc

    def write(self, record: PlaceRecord) -> None:
        """Append one record to the array.

        Raises:
            JsonOutputError: If the record cannot be serialised or written.
        """
        try:
            payload = record.model_dump_json()
            if self._count:
                self._stream.write(",")
            self._stream.write(payload)
        except (PydanticSerializationError, OSError) as exc:
            msg = f"error while trying to dump json output for {record!r}: {exc}"
            raise JsonOutputError(msg) from exc
        self._count += 1
