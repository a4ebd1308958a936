"""Single-point coordinate parsing.

KML writes a point as ``lon,lat,alt``. Only that exact form is kept and
flipped to ``lat,lon``; lines, polygons and anything else are dropped.
"""

from __future__ import annotations

import re

# lon,lat,alt with an optional single trailing space
_POINT_PATTERN = re.compile(r"(\d+\.\d+),(\d+\.\d+),\d+ ?", re.ASCII)


def parse_coordinate(raw_text: str | None) -> str | None:
    """Convert ``"LON,LAT,ALT"`` text to ``"LAT,LON"``.

    Returns ``None`` when the text is absent or is not a single point,
    which includes every multi-point and polygon coordinate list.

    Examples:
        >>> parse_coordinate("4.401,51.216,0")
        '51.216,4.401'
        >>> parse_coordinate("4.401,51.216,0 4.402,51.217,0") is None
        True
    """
    if raw_text is None:
        return None
    match = _POINT_PATTERN.fullmatch(raw_text)
    if match is None:
        return None
    longitude, latitude = match.groups()
    return f"{latitude},{longitude}"
