"""
Export module - Track file serialization.

This module contains:
- serialize / deserialize: Game <-> track JSON text
- to_document / from_document: Game <-> track document dictionaries
- write_to_file / load_from_file: File helpers
"""

from linetrack.export.serializer import (
    NumpyEncoder,
    deserialize,
    from_document,
    load_from_file,
    serialize,
    to_document,
    write_to_file,
)

__all__ = [
    "NumpyEncoder",
    "serialize",
    "deserialize",
    "to_document",
    "from_document",
    "write_to_file",
    "load_from_file",
]
