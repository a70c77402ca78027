"""Source readers for layerenv.

A reader turns a source name into text, or None when it does not exist:
- FileSourceReader - files relative to a base directory
- MappingSourceReader - in-memory name -> text mapping

Usage:
    from layerenv.sources import FileSourceReader, MappingSourceReader

    reader = FileSourceReader.discover()      # nearest .env upwards
    reader = MappingSourceReader({".env": "A=1"})
"""

from .base import SourceHandle, SourceReader
from .file import FileSourceReader
from .memory import MappingSourceReader

__all__ = [
    "SourceHandle",
    "SourceReader",
    "FileSourceReader",
    "MappingSourceReader",
]
