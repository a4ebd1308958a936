"""Conversion outcome models.

- ConversionResult: one converted KML file
- BatchSummary: all files of one directory run
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one KML file.

    Attributes:
        source: Path of the KML input.
        target: Path of the JSON output.
        placemark_count: Records written to ``target``.
        error: Structured error payload when the conversion failed, else empty.
    """

    source: str
    target: str
    placemark_count: int = 0
    error: dict[str, object] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the file converted without error."""
        return not self.error

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for logging."""
        return {
            "source": self.source,
            "target": self.target,
            "placemark_count": self.placemark_count,
            "error": dict(self.error),
        }


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Outcome of converting every KML file in a directory."""

    input_dir: str
    output_dir: str
    results: list[ConversionResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> list[ConversionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def placemark_count(self) -> int:
        return sum(r.placemark_count for r in self.results)
