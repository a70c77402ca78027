"""In-memory source reader.

Serves sources from a dict, the way bundled assets are served by name.
Useful for tests and for applications that embed their env files.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .base import SourceReader


class MappingSourceReader(SourceReader):
    """Source reader backed by a name -> text mapping.

    Example:
        reader = MappingSourceReader({".env": "HOST=localhost\\n"})
        reader.read(".env")       # "HOST=localhost\\n"
        reader.read(".missing")   # None
    """

    def __init__(self, sources: Optional[Mapping[str, str]] = None) -> None:
        self._sources: Dict[str, str] = dict(sources or {})

    def read(self, name: str) -> Optional[str]:
        return self._sources.get(name)

    def put(self, name: str, text: str) -> None:
        """Add or replace a source."""
        self._sources[name] = text

    def remove(self, name: str) -> bool:
        """Remove a source. Returns False if it was not present."""
        return self._sources.pop(name, None) is not None
