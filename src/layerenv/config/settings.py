"""Dataclass-based settings for layerenv loading.

Defaults used by ``EnvStore.load`` and the command line, overridable from
environment variables with a parameterized prefix.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class LoadSettings:
    """Load configuration

    Attributes:
        file_name: Primary source name (default: .env)
        base_dir: Directory that relative source names resolve against
        encoding: Text encoding for file sources
        optional: Whether missing or empty sources are tolerated by default
    """

    file_name: str = ".env"
    base_dir: Optional[Path] = None
    encoding: str = "utf-8"
    optional: bool = False

    def __post_init__(self):
        if isinstance(self.base_dir, str):
            self.base_dir = Path(self.base_dir)

    @classmethod
    def from_env(cls, prefix: str = "LAYERENV") -> "LoadSettings":
        """Load settings from environment variables

        Args:
            prefix: Environment variable prefix

        Environment variables:
            {prefix}_FILE: Primary source name
            {prefix}_DIR: Base directory for relative names
            {prefix}_ENCODING: File encoding
            {prefix}_OPTIONAL: "true" to tolerate missing/empty sources
        """
        base_dir = os.environ.get(f"{prefix}_DIR")
        return cls(
            file_name=os.environ.get(f"{prefix}_FILE", ".env"),
            base_dir=Path(base_dir) if base_dir else None,
            encoding=os.environ.get(f"{prefix}_ENCODING", "utf-8"),
            optional=os.environ.get(f"{prefix}_OPTIONAL", "false").lower() in _TRUE_VALUES,
        )
