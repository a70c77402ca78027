"""Base source reader interface

Defines how the loader turns a source name into text. Readers never
raise for a missing source; they return None and let the merge engine
decide whether that is an error.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple, Optional


class SourceHandle(NamedTuple):
    """Reference to a named source that a SourceReader resolves."""

    name: str

    def __str__(self) -> str:
        return self.name


class SourceReader(ABC):
    """Abstract base class for source text retrieval"""

    @abstractmethod
    def read(self, name: str) -> Optional[str]:
        """
        Read the text of a named source

        Args:
            name: Source name (a relative path, asset key, etc.)

        Returns:
            The full text, or None if the source does not exist
        """

    def exists(self, name: str) -> bool:
        """
        Check if a source exists

        Args:
            name: Source name

        Returns:
            True if the source can be read
        """
        return self.read(name) is not None
