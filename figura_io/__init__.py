"""
figura I/O
==========

Bounded Context: Raw bytes in, record layout.

    figura_io/
    ├── codec.py     # RecordLayout, write_records
    └── sources.py   # ByteSource, FileByteSource, MemoryByteSource, ScriptedByteSource
"""

from figura_io.codec import RecordLayout, write_records
from figura_io.sources import (
    ByteSource,
    FileByteSource,
    MemoryByteSource,
    ScriptedByteSource,
)

__all__ = [
    "RecordLayout",
    "write_records",
    "ByteSource",
    "FileByteSource",
    "MemoryByteSource",
    "ScriptedByteSource",
]
