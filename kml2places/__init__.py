"""KML to JSON place converter.

Streams KML documents through a context-stack interpreter and writes a
flat JSON array of place records (name, type, description, coordinate,
address) per input file.
"""

__version__ = "0.1.0"
