"""Configuration for layerenv itself.

Example:
    from layerenv.config import LoadSettings

    settings = LoadSettings.from_env(prefix="LAYERENV")
"""

from layerenv.config.settings import LoadSettings

__all__ = [
    "LoadSettings",
]
