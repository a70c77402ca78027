"""Filesystem source reader.

Resolves source names as paths relative to a base directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import find_dotenv

from .base import SourceReader


class FileSourceReader(SourceReader):
    """Read env sources from files.

    Relative names are resolved against ``base_dir`` (the working
    directory at read time when not given); absolute names are used as-is.

    Example:
        reader = FileSourceReader(Path("/srv/app"))
        text = reader.read(".env.production")
    """

    def __init__(self, base_dir: Optional[Path | str] = None, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir) if base_dir else None
        self.encoding = encoding

    @classmethod
    def discover(cls, filename: str = ".env", encoding: str = "utf-8") -> "FileSourceReader":
        """Create a reader rooted where ``filename`` is found.

        Walks up from the working directory looking for ``filename``; falls
        back to the working directory when none exists.
        """
        found = find_dotenv(filename, usecwd=True)
        base_dir = Path(found).parent if found else Path.cwd()
        return cls(base_dir, encoding=encoding)

    def resolve(self, name: str) -> Path:
        path = Path(name)
        if path.is_absolute():
            return path
        return (self.base_dir or Path.cwd()) / path

    def read(self, name: str) -> Optional[str]:
        path = self.resolve(name)
        if not path.is_file():
            return None
        return path.read_text(encoding=self.encoding)
